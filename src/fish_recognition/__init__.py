"""Fish recognition client.

Normalizes uploaded images and classifies them with a remote animal
recognition service, preferring a fish interpretation of the result.
"""
