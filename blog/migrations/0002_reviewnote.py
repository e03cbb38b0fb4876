import activitylog.conf
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
        ('blog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ReviewNote',
            fields=[
                ('log_name', models.CharField(db_index=True, default=activitylog.conf.get_default_log_name, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('subject_id', models.CharField(blank=True, max_length=255, null=True)),
                ('causer_id', models.CharField(blank=True, max_length=255, null=True)),
                ('properties', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('note_id', models.BigAutoField(primary_key=True, serialize=False)),
                ('causer_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='+', to='contenttypes.contenttype')),
                ('subject_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='+', to='contenttypes.contenttype')),
            ],
            options={
                'ordering': ['-created_at', '-pk'],
                'abstract': False,
            },
        ),
    ]
