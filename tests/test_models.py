from datetime import datetime
from decimal import Decimal

from sqlalchemy import inspect

from streamcatalog.models import Session, User, Series, Episode, WatchHistory, Favorite
from streamcatalog.schemas import SeriesRecord, EpisodeRecord, UserRecord, WatchHistoryRecord


def test_table_and_column_names():
    assert Series.__table__.c.keys() == [
        "id", "title", "description", "poster_url", "cover_url", "genre", "country",
        "language", "year", "rating", "total_episodes", "status", "subscription_required",
        "is_featured", "created_at",
    ]
    assert {m.__tablename__ for m in (Session, User, Series, Episode, WatchHistory, Favorite)} == {
        "sessions", "users", "series", "episodes", "watch_history", "favorites",
    }


def test_session_expire_index(engine):
    indexes = inspect(engine).get_indexes("sessions")
    assert [(i["name"], i["column_names"]) for i in indexes] == [("IDX_session_expire", ["expire"])]


def test_user_email_is_unique():
    assert User.__table__.c.email.unique


def test_foreign_keys_have_no_delete_rule():
    for model in (Episode, WatchHistory, Favorite):
        for fk in model.__table__.foreign_keys:
            assert fk.ondelete is None
            assert fk.parent.nullable


def test_series_defaults_on_insert(db):
    series = Series(title="Test Drama")
    db.add(series)
    db.commit()
    db.refresh(series)

    assert series.status == "ongoing"
    assert series.is_featured is False
    assert series.subscription_required == "free"
    assert isinstance(series.created_at, datetime)


def test_series_round_trip_matches_record_shape(db):
    full = Series(
        title="Moonlit Palace",
        description="Court intrigue",
        poster_url="https://cdn.example.com/p.jpg",
        cover_url="https://cdn.example.com/c.jpg",
        genre="Historical",
        country="China",
        language="Mandarin",
        year=2023,
        rating=Decimal("8.7"),
        total_episodes=40,
        status="completed",
        subscription_required="vip",
        is_featured=True,
    )
    sparse = Series(title="Untitled")
    db.add_all([full, sparse])
    db.commit()

    for row in db.query(Series).all():
        record = SeriesRecord.model_validate(row)
        assert record.id == row.id
        assert record.title == row.title

    sparse_record = SeriesRecord.model_validate(sparse)
    assert sparse_record.rating is None
    assert sparse_record.year is None
    assert SeriesRecord.model_validate(full).rating == Decimal("8.7")


def test_select_record_serializes_with_camel_case_keys(db):
    user = User(id="ext-42", email="a@example.com")
    db.add(user)
    db.commit()

    dumped = UserRecord.model_validate(user).model_dump(by_alias=True)
    assert dumped["id"] == "ext-42"
    assert dumped["subscriptionTier"] == "free"
    assert "createdAt" in dumped


def test_orphan_episode_allowed(db):
    episode = Episode(episode_number=1, title="Standalone")
    db.add(episode)
    db.commit()

    record = EpisodeRecord.model_validate(episode)
    assert record.series_id is None
    assert episode.series is None


def test_deleting_series_keeps_dependent_rows(db):
    series = Series(title="Short Run")
    series.episodes.append(Episode(episode_number=1, title="One"))
    db.add(series)
    db.commit()
    series_id = series.id
    episode_id = series.episodes[0].id

    db.delete(series)
    db.commit()

    episode = db.get(Episode, episode_id)
    assert episode is not None
    assert episode.series_id == series_id


def test_deleting_parents_leaves_watch_history_and_favorites_untouched(db):
    user = User(id="viewer")
    series = Series(title="Short Run")
    episode = Episode(episode_number=1, title="One", series=series)
    watch = WatchHistory(user=user, episode=episode, series=series)
    favorite = Favorite(user=user, series=series)
    db.add_all([watch, favorite])
    db.commit()
    series_id, episode_id = series.id, episode.id
    watch_id, favorite_id = watch.id, favorite.id

    db.delete(series)
    db.delete(episode)
    db.delete(user)
    db.commit()

    watch = db.get(WatchHistory, watch_id)
    assert (watch.user_id, watch.episode_id, watch.series_id) == ("viewer", episode_id, series_id)
    favorite = db.get(Favorite, favorite_id)
    assert (favorite.user_id, favorite.series_id) == ("viewer", series_id)


def test_watch_history_defaults(db):
    record = WatchHistory(user_id="u1", episode_id=1, series_id=1)
    db.add(record)
    db.commit()
    db.refresh(record)

    shape = WatchHistoryRecord.model_validate(record)
    assert shape.progress_percentage == 0
    assert shape.completed is False
    assert shape.watched_at is not None


def test_navigable_relationships(db):
    user = User(id="viewer")
    series = Series(title="Test Drama")
    episode = Episode(episode_number=1, title="Pilot", series=series)
    db.add_all([
        WatchHistory(user=user, episode=episode, series=series, progress_percentage=40),
        Favorite(user=user, series=series),
    ])
    db.commit()

    assert [e.title for e in series.episodes] == ["Pilot"]
    assert user.watch_history[0].episode is episode
    assert episode.watch_history[0].series is series
    assert series.favorites[0].user is user
