"""HR Records package.

Organized by feature modules (candidates, employees, attendance, leaves, ...)
with a thin Flask controller layer over service/repository layers.
"""
