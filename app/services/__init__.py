"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Each public service method is one request-scoped transaction: look up,
validate, read or write, then commit or roll back.
"""
