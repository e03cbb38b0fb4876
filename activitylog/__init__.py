"""
Activity Log

Records who did what to which object, with free-form properties,
through a fluent builder on the activity model.
"""
