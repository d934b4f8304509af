"""
Images API - Images rattachees aux annonces.
"""
