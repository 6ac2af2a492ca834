import datetime

from tlog.repos.post_store import PostStore
from tlog.schemas.blog import PostDetail, PostSummary
from tlog.schemas.site import PostFilter, SiteConfig
from tlog.services.posts_service import PostsService, to_detail, to_summary
from tests.conftest import make_record

UTC = datetime.timezone.utc
FUTURE = datetime.datetime(9999, 1, 1, tzinfo=UTC)


def _service(records, homepage=None):
    store = PostStore()
    for record in records:
        store.set(record)
    config = SiteConfig(homepage=homepage or PostFilter(max_posts=5))
    return PostsService(store=store, site_config=config)


def _date(month: int) -> datetime.datetime:
    return datetime.datetime(2024, month, 1, tzinfo=UTC)


def test_list_posts_returns_published_newest_first():
    service = _service(
        [
            make_record("old", date=_date(1)),
            make_record("new", date=_date(6)),
            make_record("draft", date=_date(3), draft=True),
            make_record("future", date=FUTURE),
        ]
    )

    result = service.list_posts()

    assert [p.id for p in result] == ["new", "old"]
    assert all(isinstance(p, PostSummary) for p in result)


def test_homepage_posts_apply_site_filter():
    service = _service(
        [
            make_record("a", date=_date(1), tags=["python"]),
            make_record("b", date=_date(2), tags=["python", "private"]),
            make_record("c", date=_date(3), tags=["python"]),
            make_record("d", date=_date(4), tags=["life"]),
        ],
        homepage=PostFilter(tags=["python"], exclude_tags=["private"], max_posts=1),
    )

    assert [p.id for p in service.homepage_posts()] == ["c"]


def test_get_post_includes_drafts_and_future_posts():
    service = _service([make_record("draft", draft=True), make_record("later", date=FUTURE)])

    assert service.get_post("draft").draft is True
    assert service.get_post("later").id == "later"
    assert service.get_post("missing") is None


def test_list_tags_only_counts_published_posts():
    service = _service(
        [
            make_record("a", tags=["zeta", "alpha"]),
            make_record("b", tags=["alpha"]),
            make_record("c", tags=["hidden"], draft=True),
        ]
    )

    assert service.list_tags() == ["alpha", "zeta"]


def test_posts_for_tag_sorted_and_published():
    service = _service(
        [
            make_record("a", date=_date(1), tags=["x"]),
            make_record("b", date=_date(2), tags=["x"]),
            make_record("c", date=_date(3), tags=["x"], draft=True),
        ]
    )

    assert [p.id for p in service.posts_for_tag("x")] == ["b", "a"]
    assert service.posts_for_tag("nope") == []


def test_search_index_excludes_drafts():
    service = _service(
        [
            make_record("public", tags=["t"]),
            make_record("secret", draft=True),
        ]
    )

    entries = service.search_index()

    assert [e.id for e in entries] == ["public"]
    assert entries[0].tags == ["t"]


def test_to_summary_and_detail_fields():
    record = make_record(
        "hello",
        date=datetime.datetime(2026, 2, 11, 10, tzinfo=UTC),
        body="word " * 201,
    )

    summary = to_summary(record)
    detail = to_detail(record)

    assert summary.formattedDate == "February 11, 2026"
    assert summary.readingTime == "2 min"
    assert summary.tags == []
    assert summary.draft is False
    assert isinstance(detail, PostDetail)
    assert detail.body == record.body
    assert detail.filePath == "hello.md"
