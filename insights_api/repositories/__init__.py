"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Repositories compose SELECT statements from filter fragments and run them
through BaseRepository's pagination.
"""
