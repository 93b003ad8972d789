"""
Shared pytest configuration and fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.core.database import init_db, make_session_factory
from src.models.template import Template


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Session on the in-memory database."""
    db = make_session_factory(engine)()
    yield db
    db.close()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


# ============ Sample Template Data ============

@pytest.fixture
def facebook_ideas_template():
    """Facebook template with a hardcoded post count."""
    return {
        'id': 11,
        'name': "Facebook Post Ideas",
        'category': "Social Media",
        'subcategory': "Facebook",
        'prompt_template': "Generate 5 ideas for Facebook posts about {{topic}}.",
        'inputs': [
            {"name": "topic", "type": "text", "label": "Topic", "placeholder": "Your topic", "required": True},
            {"name": "total_posts", "type": "number", "label": "Total Posts", "placeholder": "5",
             "required": True, "default": "5"},
        ]
    }


@pytest.fixture
def instagram_hashtag_template():
    """Instagram template already using its placeholder."""
    return {
        'id': 12,
        'name': "Instagram Hashtag Generator",
        'category': "Social Media",
        'subcategory': "Instagram",
        'prompt_template': "Please generate {{total}} high performing Instagram hashtags for: \"{{instagram_post}}\".",
        'inputs': [
            {"name": "instagram_post", "type": "textarea", "label": "Instagram Post", "required": True},
            {"name": "total", "type": "number", "label": "Total", "required": True, "default": "10"},
        ]
    }


@pytest.fixture
def blog_template():
    """Template outside the social media category, no number inputs."""
    return {
        'id': 13,
        'name': "Blog Outline",
        'category': "Writing",
        'subcategory': "Blog",
        'prompt_template': "Write a blog outline about {{subject}}.",
        'inputs': [
            {"name": "subject", "type": "text", "label": "Subject", "required": True},
        ]
    }


@pytest.fixture
def sample_templates(facebook_ideas_template, instagram_hashtag_template, blog_template):
    return [facebook_ideas_template, instagram_hashtag_template, blog_template]


@pytest.fixture
def populated_session(session, sample_templates):
    """Session with the sample templates stored."""
    for data in sample_templates:
        session.add(Template(**data))
    session.commit()
    return session
