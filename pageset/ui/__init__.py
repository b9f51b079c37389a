"""
Terminal presentation for the pageset command line.
"""
