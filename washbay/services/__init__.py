"""
Service layer.

Business rules live here so routers stay thin: each module takes an
``AsyncSession`` plus the acting profile and raises the errors from
``washbay.exceptions``.
"""
