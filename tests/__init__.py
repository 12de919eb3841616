#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that need no match store
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Tests needing a match store use an in-memory SQLite database built
from the ORM metadata, so no external database is required.
"""

import itertools
from datetime import datetime, timezone
from typing import Any, Tuple

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.matcher.dto import GigProfile, TalentProfile
from database.database import build_engine, build_session_factory
from database.models import Base, Client, Gig, Talent

_email_ids = itertools.count(1)


def make_gig(**overrides: Any) -> GigProfile:
    """GigProfile for the Goa campaign shoot, with field overrides."""
    values = dict(
        id=1,
        title="Sustainable Fashion Campaign Shoot",
        description="Travel photographer in Goa for a sustainable fashion brand",
        category="Photography",
        required_skills=("Travel Photography", "Fashion Photography"),
        location="Goa",
        is_remote=False,
        min_budget=70000,
        max_budget=90000,
        style_preferences=("Pastel Tones", "Candid Portraits"),
    )
    values.update(overrides)
    return GigProfile(**values)


def make_talent(**overrides: Any) -> TalentProfile:
    """TalentProfile for a Goa-based travel photographer, with field overrides."""
    values = dict(
        id=1,
        name="Kavya Menon",
        city="Goa",
        categories=("Photography", "Travel"),
        skills=("Travel Photography", "Candid Shots"),
        experience_years=3,
        min_budget=50000,
        max_budget=100000,
        availability_status="available",
        rating=0.0,
        total_projects=0,
        bio="Travel photographer specializing in sustainable fashion portraits",
    )
    values.update(overrides)
    return TalentProfile(**values)


def create_test_store() -> Tuple[Engine, sessionmaker]:
    """In-memory SQLite engine with all tables, and a session factory bound to it."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    return engine, build_session_factory(engine)


def add_client(session_factory: sessionmaker, **overrides: Any) -> int:
    values = dict(name="Arjun Sharma", email=f"client{next(_email_ids)}@example.com", city="Mumbai")
    values.update(overrides)
    with session_factory() as session:
        client = Client(**values)
        session.add(client)
        session.commit()
        return client.id


def add_gig(session_factory: sessionmaker, **overrides: Any) -> int:
    values = dict(
        title="Sustainable Fashion Campaign Shoot",
        description="Travel photographer in Goa for a sustainable fashion brand",
        category="Photography",
        required_skills=["Travel Photography", "Fashion Photography"],
        location="Goa",
        is_remote=False,
        min_budget=70000,
        max_budget=90000,
        style_preferences=["Pastel Tones", "Candid Portraits"],
    )
    values.update(overrides)
    with session_factory() as session:
        gig = Gig(**values)
        session.add(gig)
        session.commit()
        return gig.id


def add_talent(session_factory: sessionmaker, **overrides: Any) -> int:
    values = dict(
        name="Kavya Menon",
        email=f"talent{next(_email_ids)}@example.com",
        city="Goa",
        categories=["Photography", "Travel"],
        skills=["Travel Photography", "Candid Shots"],
        experience_years=3,
        min_budget=50000,
        max_budget=100000,
        availability_status="available",
        bio="Travel photographer specializing in sustainable fashion portraits",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    values.update(overrides)
    with session_factory() as session:
        talent = Talent(**values)
        session.add(talent)
        session.commit()
        return talent.id
