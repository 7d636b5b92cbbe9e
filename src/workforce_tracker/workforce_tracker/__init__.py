"""Workforce Tracker package.

This package is organized by feature modules (employees, attendance, advances,
payouts, payroll, ...) with a thin Flask controller layer on top of
service/repository layers. Records live in a key-value store as JSON
collections.
"""
