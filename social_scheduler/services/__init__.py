"""
Domain services. Every function takes the request's ``Session`` first.
"""
