"""auth/ -- Session token handling for the to-do relay.

Layer rule: auth/ imports from core/ (config) and third-party libraries only.
It does NOT import from api/ or web/.
web/ imports from auth/, not the other way around.
"""
