"""
Response assembly

Each fill_* helper takes a list of rows and joins the related tables in
application code, issuing one IN query per related table.
"""
from collections import defaultdict
from typing import Dict, Iterable, List
from sqlalchemy.orm import Session
from app.core.config import settings
from app.models import (
    User, Theme, Icon, Tag, Livestream, LivestreamTag, Livecomment, LivecommentReport
)


def tag_response(tag: Tag) -> dict:
    return {"id": tag.id, "name": tag.name}


def fill_user_responses(db: Session, user_ids: Iterable[int]) -> Dict[int, dict]:
    """
    Build User responses keyed by user id.
    Ids with no matching user are left out.
    """
    ids = sorted(set(user_ids))
    if not ids:
        return {}

    users = db.query(User).filter(User.id.in_(ids)).all()

    # First theme per user wins
    themes_by_user_id: Dict[int, Theme] = {}
    for theme in db.query(Theme).filter(Theme.user_id.in_(ids)).order_by(Theme.id).all():
        themes_by_user_id.setdefault(theme.user_id, theme)

    icon_hash_by_user_id: Dict[int, str] = {}
    icons = db.query(Icon.user_id, Icon.icon_hash).filter(Icon.user_id.in_(ids)).order_by(Icon.id).all()
    for user_id, icon_hash in icons:
        icon_hash_by_user_id[user_id] = icon_hash

    responses = {}
    for user in users:
        theme = themes_by_user_id.get(user.id)
        responses[user.id] = {
            "id": user.id,
            "name": user.name,
            "display_name": user.display_name,
            "description": user.description,
            "theme": {
                "id": theme.id if theme else 0,
                "dark_mode": theme.dark_mode if theme else False,
            },
            "icon_hash": icon_hash_by_user_id.get(user.id, settings.FALLBACK_ICON_HASH),
        }
    return responses


def fill_user_response(db: Session, user_id: int) -> dict:
    return fill_user_responses(db, [user_id])[user_id]


def fill_livestream_responses(db: Session, livestreams: List[Livestream]) -> List[dict]:
    """
    Build Livestream responses in the order given
    """
    if not livestreams:
        return []

    livestream_ids = [ls.id for ls in livestreams]

    # Tags, preserving association order per livestream
    tag_ids_by_livestream_id: Dict[int, List[int]] = defaultdict(list)
    links = db.query(LivestreamTag).filter(
        LivestreamTag.livestream_id.in_(livestream_ids)
    ).order_by(LivestreamTag.id).all()
    for link in links:
        tag_ids_by_livestream_id[link.livestream_id].append(link.tag_id)

    all_tag_ids = {tag_id for ids in tag_ids_by_livestream_id.values() for tag_id in ids}
    tags_by_id: Dict[int, Tag] = {}
    if all_tag_ids:
        tags_by_id = {t.id: t for t in db.query(Tag).filter(Tag.id.in_(all_tag_ids)).all()}

    owners = fill_user_responses(db, [ls.user_id for ls in livestreams])

    return [
        {
            "id": ls.id,
            "owner": owners.get(ls.user_id),
            "title": ls.title,
            "description": ls.description,
            "playlist_url": ls.playlist_url,
            "thumbnail_url": ls.thumbnail_url,
            "tags": [
                tag_response(tags_by_id[tag_id])
                for tag_id in tag_ids_by_livestream_id.get(ls.id, [])
                if tag_id in tags_by_id
            ],
            "start_at": ls.start_at,
            "end_at": ls.end_at,
        }
        for ls in livestreams
    ]


def fill_livestream_response(db: Session, livestream: Livestream) -> dict:
    return fill_livestream_responses(db, [livestream])[0]


def fill_livecomment_responses(db: Session, livecomments: List[Livecomment]) -> List[dict]:
    if not livecomments:
        return []

    users = fill_user_responses(db, [lc.user_id for lc in livecomments])

    livestream_ids = sorted({lc.livestream_id for lc in livecomments})
    livestreams = db.query(Livestream).filter(Livestream.id.in_(livestream_ids)).all()
    livestreams_by_id = {
        resp["id"]: resp for resp in fill_livestream_responses(db, livestreams)
    }

    return [
        {
            "id": lc.id,
            "user": users.get(lc.user_id),
            "livestream": livestreams_by_id.get(lc.livestream_id),
            "comment": lc.comment,
            "tip": lc.tip,
            "created_at": lc.created_at,
        }
        for lc in livecomments
    ]


def fill_livecomment_report_responses(db: Session, reports: List[LivecommentReport]) -> List[dict]:
    if not reports:
        return []

    reporters = fill_user_responses(db, [r.user_id for r in reports])

    livecomment_ids = sorted({r.livecomment_id for r in reports})
    livecomments = db.query(Livecomment).filter(Livecomment.id.in_(livecomment_ids)).all()
    livecomments_by_id = {
        resp["id"]: resp for resp in fill_livecomment_responses(db, livecomments)
    }

    return [
        {
            "id": r.id,
            "reporter": reporters.get(r.user_id),
            "livecomment": livecomments_by_id.get(r.livecomment_id),
            "created_at": r.created_at,
        }
        for r in reports
    ]


def fill_livecomment_report_response(db: Session, report: LivecommentReport) -> dict:
    return fill_livecomment_report_responses(db, [report])[0]
