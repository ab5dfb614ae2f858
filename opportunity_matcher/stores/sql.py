"""SQLAlchemy-backed stores."""

import logging
from typing import Optional

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from opportunity_matcher.errors import UpstreamError
from opportunity_matcher.matching.models import Match
from opportunity_matcher.models import OpportunityRecord, ProfileRecord, StudentMatch
from opportunity_matcher.opportunities.models import Opportunity
from opportunity_matcher.profile.models import Profile
from opportunity_matcher.stores.base import MatchStore, OpportunityStore, ProfileStore

logger = logging.getLogger("opportunity_matcher.stores.sql")


class SqlStore(ProfileStore, OpportunityStore, MatchStore):
    """Reads profiles and opportunities and writes matches through SQLAlchemy sessions."""

    def __init__(self, session_factory: sessionmaker, upsert: bool = False):
        self.session_factory = session_factory
        self.upsert = upsert

    def get_profile_by_id(self, profile_id: str) -> Optional[Profile]:
        db = self.session_factory()
        try:
            row = db.get(ProfileRecord, profile_id)
            if row is None:
                return None
            return row.to_profile()
        except SQLAlchemyError as e:
            logger.error("Failed to fetch student profile %s: %s", profile_id, e)
            raise UpstreamError("Failed to fetch student profile", details=str(e)) from e
        except ValueError as e:
            raise UpstreamError("Invalid student data received", details=str(e)) from e
        finally:
            db.close()

    def list_opportunities(self) -> list[Opportunity]:
        db = self.session_factory()
        try:
            rows = db.scalars(
                select(OpportunityRecord).order_by(OpportunityRecord.created_at, OpportunityRecord.id)
            ).all()
            opportunities = [row.to_opportunity() for row in rows]
        except SQLAlchemyError as e:
            logger.error("Failed to fetch opportunities: %s", e)
            raise UpstreamError("Failed to fetch opportunities", details=str(e)) from e
        except ValueError as e:
            raise UpstreamError("Invalid opportunity data received", details=str(e)) from e
        finally:
            db.close()

        logger.info("Fetched %d opportunities", len(opportunities))
        return opportunities

    def append_matches(self, matches: list[Match]) -> None:
        if not matches:
            return

        db = self.session_factory()
        try:
            if self.upsert:
                pairs = [
                    and_(
                        StudentMatch.student_id == m.student_id,
                        StudentMatch.opportunity_id == m.opportunity_id,
                    )
                    for m in matches
                ]
                db.execute(delete(StudentMatch).where(or_(*pairs)))
            db.add_all([StudentMatch.from_match(m) for m in matches])
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

        logger.info("Wrote %d matches (%s)", len(matches), "upsert" if self.upsert else "append")

    def list_matches(self, student_id: str) -> list[Match]:
        """Stored matches for a student, best first."""
        db = self.session_factory()
        try:
            rows = db.scalars(
                select(StudentMatch)
                .where(StudentMatch.student_id == student_id)
                .order_by(StudentMatch.match_score.desc(), StudentMatch.id)
            ).all()
            return [row.to_match() for row in rows]
        finally:
            db.close()
