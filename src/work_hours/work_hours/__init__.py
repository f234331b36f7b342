"""Work Hours Tracker package.

This package is organized by feature modules (users, settings, entries,
payroll, charts) with a thin Flask controller layer over plain services and a
key-value backed store.
"""
