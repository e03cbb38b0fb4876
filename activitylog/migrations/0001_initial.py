# Initial migration for the activity log

import activitylog.conf
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('log_name', models.CharField(db_index=True, default=activitylog.conf.get_default_log_name, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('subject_id', models.CharField(blank=True, max_length=255, null=True)),
                ('causer_id', models.CharField(blank=True, max_length=255, null=True)),
                ('properties', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('causer_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='+', to='contenttypes.contenttype')),
                ('subject_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='+', to='contenttypes.contenttype')),
            ],
            options={
                'verbose_name_plural': 'Activities',
                'ordering': ['-created_at', '-pk'],
                'abstract': False,
                'indexes': [
                    models.Index(fields=['subject_type', 'subject_id'], name='activitylog_subject_idx'),
                    models.Index(fields=['causer_type', 'causer_id'], name='activitylog_causer_idx'),
                ],
            },
        ),
    ]
