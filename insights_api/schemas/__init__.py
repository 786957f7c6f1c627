"""스키마 패키지 — 요청/응답 Pydantic 모델.

Schema package — Pydantic request and response models.
"""
