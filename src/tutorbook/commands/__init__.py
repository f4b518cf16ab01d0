"""
Command requests and list positions produced by the TutorBook parsers.
"""
