"""
repositories/ - Data Access Layer
==================================
Wraps the bank's stored procedures. Repositories turn Python arguments
into positional CALLs and return ProcedureResult objects.
"""
