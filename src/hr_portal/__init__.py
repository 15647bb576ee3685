"""HR Portal package.

This package is organized by feature modules (accounts, departments, employees,
requests) over a single JSON snapshot, with a thin Flask controller layer and
service/repository layers.
"""
