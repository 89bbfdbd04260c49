"""awsprof - manage AWS CLI accounts, roles and MFA sessions."""

__version__ = "0.1.0"
