"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Dict, List, Optional

import pytest

from studymatch.config import Settings


@pytest.fixture
def full_profile() -> Dict[str, Any]:
    """Perfil con todos los campos de matching."""
    return {
        "id": "u1",
        "name": "Ana",
        "email": "ana@example.com",
        "subjects": ["Math", "CS"],
        "preferredStudyTimes": ["Morning"],
        "academicLevel": "Undergrad",
    }


@pytest.fixture
def empty_profile() -> Dict[str, Any]:
    """Perfil que no aporta ningún token."""
    return {
        "id": "u0",
        "name": "Nadie",
        "email": "nadie@example.com",
        "subjects": [],
        "preferredStudyTimes": [],
        "academicLevel": None,
        "learningStyle": "",
    }


@pytest.fixture
def ranked_candidates() -> List[Dict[str, Any]]:
    """
    Candidatos contra subjects A-D.

    Scores esperados: low=0.1, mid1=0.5, high~0.894, mid2=0.5
    """
    filler = [f"F{i}" for i in range(24)]
    return [
        {"id": "low", "subjects": ["A", *filler]},
        {"id": "mid1", "subjects": ["A", "B", "X", "Y"]},
        {"id": "high", "subjects": ["A", "B", "C", "D", "E"]},
        {"id": "mid2", "subjects": ["C", "D", "P", "Q"]},
    ]


@pytest.fixture
def abcd_subject() -> Dict[str, Any]:
    return {"id": "s", "subjects": ["A", "B", "C", "D"]}


@pytest.fixture
def settings() -> Settings:
    """Settings explícitos (sin depender del .env)."""
    return Settings(
        supabase_url=None,
        supabase_key=None,
        match_top_n=3,
        match_min_score=0.2,
        recommendation_limit=5,
        group_min_score=0.2,
        resource_min_score=0.1,
        token_normalization="exact",
    )


class FakeUserRepository:
    """UserRepository en memoria."""

    def __init__(self, users: List[Dict[str, Any]]):
        self.users = users

    def get_by_id(self, record_id: str) -> Optional[dict]:
        for user in self.users:
            if user["id"] == record_id:
                return user
        return None

    def get_others(self, user_id: str) -> List[dict]:
        return [u for u in self.users if u["id"] != user_id]

    def get_all(self) -> List[dict]:
        return list(self.users)


class FakeTableRepository:
    """Repositorio de solo lectura para grupos y recursos."""

    def __init__(self, rows: List[Dict[str, Any]]):
        self.rows = rows

    def get_all(self) -> List[dict]:
        return list(self.rows)


class FakeHistoryRepository:
    """MatchHistoryRepository que guarda en una lista o falla a pedido."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.records = []

    def create(self, record) -> dict:
        if self.fail:
            raise ConnectionError("supabase caído")
        self.records.append(record)
        return record.to_db_dict()


@pytest.fixture
def users() -> List[Dict[str, Any]]:
    """Filas de la tabla users (snake_case como las devuelve Supabase)."""
    return [
        {
            "id": "u1",
            "name": "Ana",
            "email": "ana@example.com",
            "avatar": "https://cdn.example.com/ana.png",
            "subjects": ["Math", "CS"],
            "preferred_study_times": ["Morning"],
            "academic_level": "Undergrad",
            "interaction_history": [
                {"resource": "r1", "rating": 4},
                {"resource": "r1", "rating": 2},
                {"resource": "r2", "rating": 5},
            ],
        },
        {
            "id": "u2",
            "name": "Beto",
            "email": "beto@example.com",
            "avatar": "",
            "subjects": ["Math", "CS"],
            "preferred_study_times": ["Morning"],
            "academic_level": "Undergrad",
            "interaction_history": [{"resource": "r1", "rating": 3}],
        },
        {
            "id": "u3",
            "name": "Caro",
            "email": "caro@example.com",
            "subjects": ["Math"],
        },
        {
            "id": "u4",
            "name": "Dani",
            "email": "dani@example.com",
            "subjects": ["Art"],
        },
        {
            "id": "u5",
            "name": "Eli",
            "email": "eli@example.com",
            "subjects": ["Math", "CS"],
        },
    ]


@pytest.fixture
def groups() -> List[Dict[str, Any]]:
    return [
        {"id": "g-art", "title": "Dibujo", "subject": "Art"},
        {"id": "g-hist", "title": "Historia", "subject": "History", "academic_level": "Undergrad"},
        {"id": "g-math", "title": "Álgebra", "subject": "Math"},
        {"id": "g-math-ug", "title": "Cálculo", "subject": "Math", "academic_level": "Undergrad"},
    ]


@pytest.fixture
def resources() -> List[Dict[str, Any]]:
    """Filas de la tabla resources."""
    cdn = "https://cdn.example.com"
    return [
        {"id": "r1", "title": "Intro", "content_url": f"{cdn}/r1", "type": "Video",
         "subject_tags": ["History"]},
        {"id": "r2", "title": "Álgebra lineal", "content_url": f"{cdn}/r2", "type": "Article",
         "subject_tags": ["Math", "Algebra"]},
        {"id": "r3", "title": "Cálculo", "content_url": f"{cdn}/r3", "type": "Quiz",
         "subject_tags": ["Math"]},
        {"id": "r4", "title": "Vacío", "content_url": f"{cdn}/r4", "type": "Article",
         "subject_tags": []},
    ]


@pytest.fixture
def history_repo() -> FakeHistoryRepository:
    return FakeHistoryRepository()


@pytest.fixture
def make_service(users, groups, resources, settings):
    """Factory de MatchingService con repositorios en memoria."""
    from studymatch.matching.service import MatchingService

    def _make(history_repo=None, **overrides):
        return MatchingService(
            user_repo=FakeUserRepository(users),
            group_repo=FakeTableRepository(groups),
            resource_repo=FakeTableRepository(resources),
            history_repo=history_repo or FakeHistoryRepository(),
            settings=Settings.model_validate({**settings.model_dump(), **overrides}),
        )

    return _make


@pytest.fixture
def failing_history_repo() -> FakeHistoryRepository:
    return FakeHistoryRepository(fail=True)
