"""
Server services: session state and the booking workflow used by the routers.
"""
