"""
Contracts (data models).

This folder defines the request/response shapes for upstream integrations:
- inbound order and claim requests accepted by the API
- mainframe request bodies (CICS commarea JSON, Db2 order record)
- the client interfaces that mock and real HTTP clients implement

Both mock and real HTTP clients should use these contracts.
"""
