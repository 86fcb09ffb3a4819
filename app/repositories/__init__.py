"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Repositories run queries on the caller's session and never commit;
absent rows come back as None so services choose the error kind.
"""
