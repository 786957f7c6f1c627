"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services turn page requests into filter fragments, call repositories for
DB operations, and map rows into response schemas.
"""
