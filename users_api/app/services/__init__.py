"""
Service layer abstraction.

Services own the application data and its business rules.  HTTP
handlers only translate their results and exceptions into responses.
"""
