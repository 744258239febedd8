"""
Song catalog: CRUD over `songs`, read through a left join on `genres`.
"""
