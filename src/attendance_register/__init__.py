"""Attendance Register package.

This package is organized by feature modules (students, attendance, dashboard)
on top of a small key-value storage layer, with a thin Flask controller layer
and service/repository layers underneath.
"""
