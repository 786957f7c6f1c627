"""Insights API — 저장소/풀 리퀘스트/기여자 조회 API.

Insights API — paginated, filterable views over repositories, pull requests
and contributors.
"""
