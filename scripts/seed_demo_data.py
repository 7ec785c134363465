"""Seed idempotent demo data for local/non-production environments."""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from zabanyar.core.config import get_settings
from zabanyar.core.database import SessionLocal, close_engine
from zabanyar.core.enums import RoleEnum, TeacherStatusEnum
from zabanyar.core.security import hash_password, verify_password
from zabanyar.modules.identity.models import Role, User
from zabanyar.modules.news_articles.models import Article
from zabanyar.modules.scheduling.repository import SchedulingRepository
from zabanyar.modules.scheduling.service import SchedulingService
from zabanyar.modules.students.models import Student
from zabanyar.modules.teachers.models import Teacher
from zabanyar.modules.teachers.repository import TeachersRepository
from zabanyar.modules.writing_practice.models import WritingExercise
from zabanyar.shared.utils import utc_now

DEMO_PASSWORD = "DemoPass123!"

DEMO_ADMIN_EMAIL = "demo-admin@zabanyar.dev"
DEMO_TEACHER_EMAIL = "demo-teacher@zabanyar.dev"
DEMO_STUDENT_EMAIL = "demo-student@zabanyar.dev"

DEMO_SCHEDULE_PRESET = "evening"
DEMO_EXERCISE_TITLE = "My last holiday"
DEMO_ARTICLE_TITLE = "Learning languages with short daily habits"


@dataclass(slots=True)
class SeedStats:
    roles_created: int = 0
    users_created: int = 0
    users_updated: int = 0
    teacher_profile_created: bool = False
    student_profile_created: bool = False
    schedule_slots: int = 0
    exercise_created: bool = False
    article_created: bool = False


async def _ensure_roles(session: AsyncSession) -> int:
    created = 0
    for role_name in (RoleEnum.STUDENT, RoleEnum.TEACHER, RoleEnum.ADMIN):
        existing = await session.scalar(select(Role).where(Role.name == role_name))
        if existing is None:
            session.add(Role(name=role_name))
            created += 1
    await session.flush()
    return created


async def _ensure_user(
    session: AsyncSession,
    *,
    email: str,
    role_name: RoleEnum,
    first_name: str,
    last_name: str,
) -> tuple[User, bool]:
    role = await session.scalar(select(Role).where(Role.name == role_name))
    if role is None:
        raise RuntimeError(f"Role {role_name} was not found after ensure_roles")

    user = await session.scalar(
        select(User).options(selectinload(User.role)).where(User.email == email),
    )
    created = False
    if user is None:
        user = User(
            email=email,
            password_hash=hash_password(DEMO_PASSWORD),
            first_name=first_name,
            last_name=last_name,
            is_active=True,
            email_confirmed_at=utc_now(),
            role_id=role.id,
        )
        session.add(user)
        created = True
    else:
        if not verify_password(DEMO_PASSWORD, user.password_hash):
            user.password_hash = hash_password(DEMO_PASSWORD)
        if user.role_id != role.id:
            user.role_id = role.id
        if user.email_confirmed_at is None:
            user.email_confirmed_at = utc_now()
        if not user.is_active:
            user.is_active = True

    await session.flush()
    await session.refresh(user, attribute_names=["role"])
    return user, created


async def _ensure_teacher_profile(session: AsyncSession, teacher_user: User) -> bool:
    profile = await session.get(Teacher, teacher_user.id)
    values = {
        "first_name": teacher_user.first_name,
        "last_name": teacher_user.last_name,
        "email": teacher_user.email,
        "bio": "مدرس نمونه برای سناریوهای دمو. تمرکز بر مکالمه و گرامر کاربردی.",
        "experience_years": 6,
        "languages": ["english", "german"],
        "levels": ["beginner", "intermediate"],
        "class_types": ["online"],
        "available_days": ["saturday", "monday", "wednesday"],
        "available_hours": ["18:00", "19:00", "20:00"],
        "hourly_rate": Decimal("350000.00"),
        "status": TeacherStatusEnum.APPROVED,
        "available": True,
    }
    if profile is None:
        session.add(Teacher(id=teacher_user.id, **values))
        await session.flush()
        return True

    for key, value in values.items():
        setattr(profile, key, value)
    await session.flush()
    return False


async def _ensure_student_profile(session: AsyncSession, student_user: User) -> bool:
    profile = await session.get(Student, student_user.id)
    if profile is not None:
        return False
    session.add(
        Student(
            id=student_user.id,
            first_name=student_user.first_name,
            last_name=student_user.last_name,
            email=student_user.email,
            current_language_level="beginner",
            preferred_languages=["english"],
            learning_goals="مکالمه روزمره",
        )
    )
    await session.flush()
    return True


async def _ensure_schedule(session: AsyncSession, *, admin_user: User, teacher_user: User) -> int:
    service = SchedulingService(SchedulingRepository(session), TeachersRepository(session))
    grid = await service.apply_preset(teacher_user.id, DEMO_SCHEDULE_PRESET, admin_user)
    return grid.available_count


async def _ensure_exercise(session: AsyncSession) -> bool:
    existing = await session.scalar(select(WritingExercise).where(WritingExercise.title == DEMO_EXERCISE_TITLE))
    if existing is not None:
        return False
    session.add(
        WritingExercise(
            title=DEMO_EXERCISE_TITLE,
            description="Describe a trip you enjoyed.",
            prompt="Write about your last holiday. Where did you go, and what did you do?",
            topic_category="travel",
            difficulty_level="beginner",
            tips=["Use the past simple", "Connect ideas with commas and linking words"],
        )
    )
    await session.flush()
    return True


async def _ensure_article(session: AsyncSession) -> bool:
    existing = await session.scalar(select(Article).where(Article.title == DEMO_ARTICLE_TITLE))
    if existing is not None:
        return False
    session.add(
        Article(
            title=DEMO_ARTICLE_TITLE,
            summary="Ten minutes a day beats one long weekly session.",
            content=(
                "Many learners study for hours once a week. Research on spaced practice suggests that "
                "short, regular sessions help memory more. Try reading one short article every day."
            ),
            category="education",
            difficulty_level="intermediate",
            is_featured=True,
        )
    )
    await session.flush()
    return True


async def _run_seed(*, allow_production: bool) -> SeedStats:
    settings = get_settings()
    app_env = settings.app_env.strip().lower()
    if app_env in {"production", "prod"} and not allow_production:
        raise RuntimeError(
            "Refusing to seed demo data in production. "
            "Re-run with --allow-production only if you are absolutely sure.",
        )

    stats = SeedStats()

    async with SessionLocal() as session:
        try:
            stats.roles_created = await _ensure_roles(session)

            admin_user, admin_created = await _ensure_user(
                session,
                email=DEMO_ADMIN_EMAIL,
                role_name=RoleEnum.ADMIN,
                first_name="مدیر",
                last_name="دمو",
            )
            teacher_user, teacher_created = await _ensure_user(
                session,
                email=DEMO_TEACHER_EMAIL,
                role_name=RoleEnum.TEACHER,
                first_name="سارا",
                last_name="احمدی",
            )
            student_user, student_created = await _ensure_user(
                session,
                email=DEMO_STUDENT_EMAIL,
                role_name=RoleEnum.STUDENT,
                first_name="علی",
                last_name="رضایی",
            )

            stats.users_created = sum([admin_created, teacher_created, student_created])
            stats.users_updated = 3 - stats.users_created

            stats.teacher_profile_created = await _ensure_teacher_profile(session, teacher_user)
            stats.student_profile_created = await _ensure_student_profile(session, student_user)
            stats.schedule_slots = await _ensure_schedule(
                session,
                admin_user=admin_user,
                teacher_user=teacher_user,
            )
            stats.exercise_created = await _ensure_exercise(session)
            stats.article_created = await _ensure_article(session)

            await session.commit()
        except Exception:
            await session.rollback()
            raise

    return stats


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Seed idempotent demo data for Zabanyar (users, approved teacher with a weekly "
            "schedule, student profile, a writing exercise and an article)."
        ),
    )
    parser.add_argument(
        "--allow-production",
        action="store_true",
        help="Allow seeding even when APP_ENV is production/prod.",
    )
    return parser


def _print_summary(stats: SeedStats) -> None:
    print("Demo seed completed.")
    print(f"- Roles created: {stats.roles_created}")
    print(f"- Users created: {stats.users_created}")
    print(f"- Users updated: {stats.users_updated}")
    print(f"- Teacher profile created: {stats.teacher_profile_created}")
    print(f"- Student profile created: {stats.student_profile_created}")
    print(f"- Schedule slots available: {stats.schedule_slots}")
    print(f"- Writing exercise created: {stats.exercise_created}")
    print(f"- Article created: {stats.article_created}")
    print("")
    print("Demo credentials (non-production only):")
    print(f"- admin:   {DEMO_ADMIN_EMAIL} / {DEMO_PASSWORD}")
    print(f"- teacher: {DEMO_TEACHER_EMAIL} / {DEMO_PASSWORD}")
    print(f"- student: {DEMO_STUDENT_EMAIL} / {DEMO_PASSWORD}")


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        stats = asyncio.run(_run_seed(allow_production=args.allow_production))
    except Exception as exc:
        print(f"Demo seed failed: {exc}")
        return 1
    finally:
        asyncio.run(close_engine())

    _print_summary(stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
