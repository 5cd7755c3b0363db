"""Phone number package.

``formatter`` holds the stateless format / split / trim / validate
functions; ``value`` holds the calling code + national number value object.
"""
