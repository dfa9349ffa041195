"""HR attendance package.

Organized by feature modules (attendance, recap, sheets) with a thin Flask
controller layer on top of pure pipeline functions and repository protocols.
"""
