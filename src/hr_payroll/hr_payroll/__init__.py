"""HR payroll engine package.

Feature modules (employees, attendance, leaves, payroll) each expose a domain
model, a repository interface and a MySQL implementation; the payroll service
combines them into preview/commit/status operations.
"""
