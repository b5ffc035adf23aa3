"""Server units loaded by import string in tests."""

# Records of every call made by the units below, in call order
calls = []
