"""MyVetStudy access control: roles, permissions and route guards."""

__version__ = "0.1.0"
