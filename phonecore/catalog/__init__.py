"""Country catalog package.

Builds the read-only list of countries (ISO code, English name, telephone
calling code) that country pickers and phone inputs are populated from.
"""
