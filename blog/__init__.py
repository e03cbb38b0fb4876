"""
Sample blog app used as subject and causer models in the activity log tests.
"""
