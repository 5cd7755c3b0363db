"""Form binding package.

Glue between the core and a form view: option rows for country pickers,
phone number payloads, and the phone input binding model.
"""
