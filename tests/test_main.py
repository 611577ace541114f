"""
Startup tests — demo seeding and the migrate/seed/list runner.
"""
from datetime import datetime

import pytest
from sqlalchemy.orm import Session

from article_store import main as main_module
from article_store.database import session_scope
from article_store.seed import DEMO_ARTICLES, seed_demo_data
from article_store.services import article_service


def test_seed_demo_data(db_session: Session):
    authored = datetime(2024, 2, 2, 2, 2, 2)
    created = seed_demo_data(db_session, authored)

    assert [a.title for a in created] == [title for title, _ in DEMO_ARTICLES]
    assert [len(a.comments) for a in created] == [0, 3, 1]
    assert all(a.authored == authored for a in created)

    stored = article_service.find_all(db_session)
    assert stored == set(created)


def test_session_scope_commits(session_factory):
    with session_scope(session_factory) as db:
        article = article_service.create_draft(db, "Committed", datetime(2024, 1, 1))

    with session_factory() as db:
        assert article_service.find_article_by_id(db, article.id) is not None


def test_session_scope_rolls_back_on_error(session_factory):
    with pytest.raises(RuntimeError):
        with session_scope(session_factory) as db:
            article = article_service.create_draft(db, "Rolled back", datetime(2024, 1, 1))
            raise RuntimeError("abort")

    with session_factory() as db:
        assert article_service.find_article_by_id(db, article.id) is None


def test_run_migrates_seeds_and_lists(fresh_engine):
    lines = main_module.run(bind=fresh_engine)

    assert len(lines) == 3
    assert "Beat the Queue" in lines[0]
    assert "this made me laugh and cry" in lines[1]
    assert "liar! There are only two tricks!" in lines[2]


def test_run_migrates_from_any_working_directory(fresh_engine, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    lines = main_module.run(bind=fresh_engine, seed=False)
    assert lines == []


def test_run_without_seed_lists_existing_rows(fresh_engine):
    main_module.run(bind=fresh_engine)
    lines = main_module.run(bind=fresh_engine, seed=False)
    assert len(lines) == 3


def test_main_parses_flags(monkeypatch, capsys):
    calls = {}

    def fake_run(migrate, seed):
        calls.update(migrate=migrate, seed=seed)
        return ["line"]

    monkeypatch.setattr(main_module, "run", fake_run)
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)

    main_module.main(["--skip-migrations", "--no-seed"])

    assert calls == {"migrate": False, "seed": False}
    assert capsys.readouterr().out.strip() == "line"
