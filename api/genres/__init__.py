"""
Genre catalog: create and list.
"""
