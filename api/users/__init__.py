"""
Users resource and job applications.
"""
