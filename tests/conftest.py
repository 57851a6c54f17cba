"""Shared test fixtures for Payload Insight tests."""

import os

import pytest


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty home and working directory, no PAYLOAD_INSIGHT_* vars."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("PAYLOAD_INSIGHT_"):
            monkeypatch.delenv(key)
    return work


@pytest.fixture
def users_response():
    """Array of user objects, as returned by a typical list endpoint."""
    return [
        {
            "id": 1,
            "name": "Ada Lovelace",
            "avatar_url": "https://cdn.example.com/avatars/ada.png",
            "bio": "Mathematician and writer, known for work on the Analytical Engine.",
            "created_at": "2024-01-15T09:30:00Z",
        },
        {
            "id": 2,
            "name": "Grace Hopper",
            "avatar_url": "https://cdn.example.com/avatars/grace.jpg",
            "bio": "Computer scientist and pioneer of machine-independent languages.",
            "created_at": "2024-02-01T14:05:00Z",
        },
        {
            "id": 3,
            "name": "Alan Turing",
            "avatar_url": "https://cdn.example.com/avatars/alan.png",
            "bio": "Mathematician, logician and father of theoretical computer science.",
            "created_at": "2024-03-12T08:00:00Z",
        },
    ]


@pytest.fixture
def product_response():
    """Single product object with nested arrays and a reviews list."""
    return {
        "sku": "AB-1234",
        "title": "Mechanical Keyboard",
        "price": 129.99,
        "currency": "USD",
        "tags": ["keyboards", "peripherals", "mechanical"],
        "images": [
            {"url": "https://cdn.example.com/p/kb-1.jpg", "alt": "Front"},
            {"url": "https://cdn.example.com/p/kb-2.jpg", "alt": "Side"},
        ],
        "reviews": [
            {"rating": 5, "comment": "Great switches, solid build."},
            {"rating": 4, "comment": "Loud but satisfying."},
        ],
        "dimensions": {"width": 44.2, "depth": 13.1},
    }
