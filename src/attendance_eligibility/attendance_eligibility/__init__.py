"""Attendance Eligibility package.

Organized by feature modules (students, attendance, eligibility, medical, ...)
around a single in-memory Store, with a thin Flask controller layer on top of
plain service classes.
"""
