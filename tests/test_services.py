import logging
import uuid
from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.errors import StorageError
from app.models.company import CompanyInfo
from app.services import blog, company, inquiries, pricing, projects, users
from factories import make_blog_post, make_company_info, make_inquiry, make_pricing_plan, make_project


# --- Projects ---

def test_create_then_get_project_returns_same_fields(db):
    fields = make_project()
    created = projects.create_project(db, dict(fields))

    assert created.id
    assert created.created_at is not None
    assert created.updated_at is not None

    fetched = projects.get_project_by_id(db, created.id)
    assert fetched is not None
    for key, value in fields.items():
        assert getattr(fetched, key) == value


def test_ids_are_unique(db):
    first = projects.create_project(db, make_project())
    second = projects.create_project(db, make_project())
    assert first.id != second.id


def test_create_ignores_server_assigned_fields(db):
    fields = make_project(id="client-chosen", created_at=datetime(2000, 1, 1), updated_at=datetime(2000, 1, 1))
    project = projects.create_project(db, fields)

    assert project.id != "client-chosen"
    assert project.created_at.year != 2000
    assert project.updated_at.year != 2000


def test_update_cannot_change_id_or_created_at(db):
    project = projects.create_project(db, make_project())
    project_id = project.id
    created_at = project.created_at

    updated = projects.update_project(
        db, project_id, {"id": "renamed", "created_at": datetime(2000, 1, 1), "title": "New"}
    )

    assert updated.id == project_id
    assert updated.created_at == created_at
    assert updated.title == "New"
    assert projects.get_project_by_id(db, "renamed") is None


def test_get_missing_project_returns_none(db):
    assert projects.get_project_by_id(db, str(uuid.uuid4())) is None


def test_projects_ordered_by_order_desc(db):
    for order in (3, 1, 2):
        projects.create_project(db, make_project(title=f"p{order}", order=order))

    assert [p.order for p in projects.get_all_projects(db)] == [3, 2, 1]


def test_featured_projects_only_returns_featured(db):
    projects.create_project(db, make_project(title="a", featured=True, order=1))
    projects.create_project(db, make_project(title="b", featured=False, order=5))
    projects.create_project(db, make_project(title="c", featured=True, order=9))

    featured = projects.get_featured_projects(db)
    assert [p.title for p in featured] == ["c", "a"]


def test_update_project_changes_only_supplied_fields(db):
    created = projects.create_project(db, make_project())
    created_at = created.created_at
    updated_before = created.updated_at

    updated = projects.update_project(db, created.id, {"title": "Renamed"})

    assert updated.title == "Renamed"
    assert updated.description == "Modern e-commerce solution"
    assert updated.technologies == ["React", "Node.js", "PostgreSQL"]
    assert updated.live_url == "https://shop.example.com"
    assert updated.created_at == created_at
    assert updated.updated_at > updated_before


def test_update_missing_project_returns_none_and_creates_nothing(db):
    assert projects.update_project(db, str(uuid.uuid4()), {"title": "x"}) is None
    assert projects.get_all_projects(db) == []


def test_delete_project(db):
    created = projects.create_project(db, make_project())

    assert projects.delete_project(db, created.id) is True
    assert projects.get_project_by_id(db, created.id) is None
    assert projects.delete_project(db, created.id) is False


def test_delete_unknown_id_returns_false(db):
    assert projects.delete_project(db, str(uuid.uuid4())) is False


# --- Blog posts ---

def test_blog_posts_newest_first(db):
    for slug in ("first", "second", "third"):
        blog.create_blog_post(db, make_blog_post(slug=slug))

    assert [p.slug for p in blog.get_all_blog_posts(db)] == ["third", "second", "first"]


def test_blog_published_filter(db):
    blog.create_blog_post(db, make_blog_post(slug="live", published=True))
    blog.create_blog_post(db, make_blog_post(slug="draft", published=False))

    assert [p.slug for p in blog.get_all_blog_posts(db, published=True)] == ["live"]
    assert [p.slug for p in blog.get_all_blog_posts(db, published=False)] == ["draft"]
    assert {p.slug for p in blog.get_all_blog_posts(db)} == {"live", "draft"}


def test_blog_defaults(db):
    fields = make_blog_post()
    del fields["author"]
    del fields["published"]

    post = blog.create_blog_post(db, fields)
    assert post.author == "Team"
    assert post.published is True


def test_get_blog_post_by_slug(db):
    created = blog.create_blog_post(db, make_blog_post(slug="x"))

    assert blog.get_blog_post_by_slug(db, "x").id == created.id
    assert blog.get_blog_post_by_slug(db, "missing") is None


def test_duplicate_slug_is_rejected(db):
    blog.create_blog_post(db, make_blog_post(slug="x"))

    with pytest.raises(StorageError) as exc_info:
        blog.create_blog_post(db, make_blog_post(slug="x", title="Other"))
    assert isinstance(exc_info.value.__cause__, IntegrityError)

    # The session is usable again after the rollback
    assert len(blog.get_all_blog_posts(db)) == 1


def test_update_and_delete_blog_post(db):
    created = blog.create_blog_post(db, make_blog_post())

    updated = blog.update_blog_post(db, created.id, {"published": False, "tags": ["CSS"]})
    assert updated.published is False
    assert updated.tags == ["CSS"]
    assert updated.title == "CSS Grid vs Flexbox"

    assert blog.delete_blog_post(db, created.id) is True
    assert blog.get_blog_post_by_id(db, created.id) is None


# --- Pricing plans ---

def test_pricing_plans_ordered_and_active_filter(db):
    pricing.create_pricing_plan(db, make_pricing_plan(name="Starter", order=1))
    pricing.create_pricing_plan(db, make_pricing_plan(name="Pro", order=2))
    pricing.create_pricing_plan(db, make_pricing_plan(name="Legacy", order=3, active=False))

    assert [p.name for p in pricing.get_all_pricing_plans(db)] == ["Legacy", "Pro", "Starter"]
    assert [p.name for p in pricing.get_all_pricing_plans(db, active_only=True)] == ["Pro", "Starter"]


def test_pricing_plan_defaults(db):
    fields = make_pricing_plan()
    for key in ("currency", "popular", "order", "active"):
        del fields[key]

    plan = pricing.create_pricing_plan(db, fields)
    assert plan.currency == "IDR"
    assert plan.popular is False
    assert plan.order == 0
    assert plan.active is True


def test_update_pricing_plan(db):
    plan = pricing.create_pricing_plan(db, make_pricing_plan())

    updated = pricing.update_pricing_plan(db, plan.id, {"price": 7500000})
    assert updated.price == 7500000
    assert updated.features == ["Responsive Design", "Up to 5 Pages"]
    assert pricing.update_pricing_plan(db, str(uuid.uuid4()), {"price": 1}) is None


def test_delete_pricing_plan(db):
    plan = pricing.create_pricing_plan(db, make_pricing_plan())

    assert pricing.delete_pricing_plan(db, plan.id) is True
    assert pricing.delete_pricing_plan(db, plan.id) is False


# --- Inquiries ---

def test_new_inquiry_starts_as_new(db):
    inquiry = inquiries.create_inquiry(db, make_inquiry())
    assert inquiry.status == "new"

    # A status in the payload is ignored
    other = inquiries.create_inquiry(db, {**make_inquiry(), "status": "closed"})
    assert other.status == "new"


def test_inquiries_newest_first(db):
    for name in ("a", "b", "c"):
        inquiries.create_inquiry(db, make_inquiry(name=name))

    assert [i.name for i in inquiries.get_all_inquiries(db)] == ["c", "b", "a"]


def test_update_inquiry_status_only_touches_status(db):
    inquiry = inquiries.create_inquiry(db, make_inquiry())

    updated = inquiries.update_inquiry_status(db, inquiry.id, "contacted")
    assert updated.status == "contacted"
    assert updated.message == "We need a new website."
    assert inquiries.update_inquiry_status(db, str(uuid.uuid4()), "contacted") is None


def test_delete_inquiry(db):
    inquiry = inquiries.create_inquiry(db, make_inquiry())

    assert inquiries.delete_inquiry(db, inquiry.id) is True
    assert inquiries.get_inquiry_by_id(db, inquiry.id) is None


# --- Company info ---

def test_company_info_absent_by_default(db):
    assert company.get_company_info(db) is None


def test_company_info_upsert_keeps_a_single_row(db):
    created = company.update_company_info(db, make_company_info())
    assert created.company_name == "RakitDev"

    updated = company.update_company_info(db, {"tagline": "New tagline"})

    assert updated.id == created.id
    assert updated.tagline == "New tagline"
    assert updated.company_name == "RakitDev"
    assert db.query(CompanyInfo).count() == 1
    assert company.get_company_info(db).tagline == "New tagline"


def test_company_info_update_bumps_updated_at(db):
    created = company.update_company_info(db, make_company_info())
    before = created.updated_at

    updated = company.update_company_info(db, {"team_size": "20-50"})
    assert updated.updated_at > before


def test_incomplete_first_company_info_fails(db):
    with pytest.raises(StorageError):
        company.update_company_info(db, {"tagline": "only this"})
    assert company.get_company_info(db) is None


def test_second_company_info_row_violates_singleton(db):
    company.update_company_info(db, make_company_info())

    db.add(CompanyInfo(**make_company_info(company_name="Duplicate")))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    assert db.query(CompanyInfo).count() == 1


# --- Users ---

def test_create_and_find_user(db):
    user = users.create_user(db, {"username": "admin", "password": users.hash_password("admin123")})

    assert user.role == "admin"
    assert user.password != "admin123"
    assert users.get_user(db, user.id).username == "admin"
    assert users.get_user_by_username(db, "admin").id == user.id
    assert users.get_user_by_username(db, "nobody") is None
    assert users.verify_password("admin123", user.password)
    assert not users.verify_password("wrong", user.password)


def test_duplicate_username_is_rejected(db):
    users.create_user(db, {"username": "admin", "password": users.hash_password("a")})

    with pytest.raises(StorageError):
        users.create_user(db, {"username": "admin", "password": users.hash_password("b")})


def test_update_and_delete_user(db):
    user = users.create_user(db, {"username": "editor", "password": users.hash_password("pw")})

    updated = users.update_user(db, user.id, {"role": "editor"})
    assert updated.role == "editor"
    assert updated.username == "editor"

    assert users.delete_user(db, user.id) is True
    assert users.get_user(db, user.id) is None


def test_hash_password_rejects_empty():
    with pytest.raises(ValueError):
        users.hash_password("")


# --- Failures ---

def test_storage_failure_is_wrapped(database, db):
    database.drop_all()

    with pytest.raises(StorageError) as exc_info:
        projects.get_all_projects(db)
    assert isinstance(exc_info.value.__cause__, SQLAlchemyError)


def test_create_user_and_inquiry_ignore_server_assigned_fields(db):
    user = users.create_user(db, {"id": "mine", "username": "u", "password": users.hash_password("pw")})
    inquiry = inquiries.create_inquiry(db, {**make_inquiry(), "id": "mine-too"})

    assert user.id != "mine"
    assert inquiry.id != "mine-too"


def test_company_info_update_keeps_id(db):
    created = company.update_company_info(db, make_company_info())

    updated = company.update_company_info(db, {"id": "other", "singleton": False, "tagline": "x"})
    assert updated.id == created.id
    assert updated.singleton is True


def test_incomplete_first_company_info_is_not_retried(db, caplog):
    with caplog.at_level(logging.WARNING, logger="app.services.company"):
        with pytest.raises(StorageError) as exc_info:
            company.update_company_info(db, {"tagline": "only this"})

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert "retrying" not in caplog.text


def test_lost_first_insert_race_retries_as_update(db, monkeypatch, caplog):
    real_upsert = company._upsert
    calls = []

    def racing_upsert(session, fields):
        calls.append(fields)
        if len(calls) == 1:
            # Another writer creates the row first; our insert then conflicts
            session.add(CompanyInfo(**make_company_info(company_name="Winner")))
            session.commit()
            raise IntegrityError("INSERT INTO company_info ...", {}, Exception("unique singleton"))
        return real_upsert(session, fields)

    monkeypatch.setattr(company, "_upsert", racing_upsert)

    with caplog.at_level(logging.WARNING, logger="app.services.company"):
        info = company.update_company_info(db, make_company_info(tagline="Loser's tagline"))

    assert len(calls) == 2
    assert "retrying as update" in caplog.text
    assert info.tagline == "Loser's tagline"
    assert db.query(CompanyInfo).count() == 1
