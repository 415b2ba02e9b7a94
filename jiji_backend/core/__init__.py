"""
Core utilities: the error hierarchy shared by config, database and API server.
"""
