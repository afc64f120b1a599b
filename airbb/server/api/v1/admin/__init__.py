"""
Administration routers: CRUD over locations, users and residences.
"""
