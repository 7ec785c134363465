"""Initial schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 09:30:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


role_enum = sa.Enum("student", "teacher", "admin", name="role_enum", native_enum=False)
teacher_status_enum = sa.Enum(
    "pending", "approved", "active", "inactive", "rejected", name="teacher_status_enum", native_enum=False
)
student_status_enum = sa.Enum("active", "inactive", name="student_status_enum", native_enum=False)
booking_status_enum = sa.Enum(
    "pending", "scheduled", "confirmed", "completed", "cancelled", name="booking_status_enum", native_enum=False
)
class_status_enum = sa.Enum(
    "scheduled", "in_progress", "completed", "cancelled", name="class_status_enum", native_enum=False
)
payment_status_enum = sa.Enum("pending", "paid", "failed", "refunded", name="payment_status_enum", native_enum=False)
wallet_transaction_type_enum = sa.Enum(
    "commission", "withdrawal", name="wallet_transaction_type_enum", native_enum=False
)
notification_type_enum = sa.Enum("info", "success", "warning", "error", name="notification_type_enum", native_enum=False)
reading_status_enum = sa.Enum("not_started", "reading", "completed", name="reading_status_enum", native_enum=False)


def _id_col() -> sa.Column:
    return sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, nullable=False)


def _user_id_pk_col() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("users.id", ondelete="CASCADE", name="fk_id_users"),
        primary_key=True,
        nullable=False,
    )


def _created_col() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)


def _updated_col() -> sa.Column:
    return sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False)


def _json_col(name: str, nullable: bool = True) -> sa.Column:
    return sa.Column(name, postgresql.JSONB(), nullable=nullable)


def upgrade() -> None:
    op.create_table(
        "roles",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("name", role_enum, nullable=False),
        sa.UniqueConstraint("name", name="uq_roles_name"),
    )

    op.create_table(
        "users",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=128), nullable=False),
        sa.Column("last_name", sa.String(length=128), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("email_confirmed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "role_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("roles.id", ondelete="RESTRICT", name="fk_users_role_id_roles"),
            nullable=False,
        ),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "refresh_tokens",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE", name="fk_refresh_tokens_user_id_users"),
            nullable=False,
        ),
        sa.Column("token_id", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("token_id", name="uq_refresh_tokens_token_id"),
    )
    op.create_index("ix_refresh_tokens_token_id", "refresh_tokens", ["token_id"])

    op.create_table(
        "teachers",
        _user_id_pk_col(),
        _created_col(),
        _updated_col(),
        sa.Column("first_name", sa.String(length=128), nullable=False),
        sa.Column("last_name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("gender", sa.String(length=16), nullable=True),
        sa.Column("birthdate", sa.Date(), nullable=True),
        sa.Column("national_id", sa.String(length=32), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=128), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("education", sa.Text(), nullable=True),
        sa.Column("experience_years", sa.Integer(), nullable=False),
        _json_col("languages"),
        _json_col("levels"),
        _json_col("class_types"),
        _json_col("available_days"),
        _json_col("available_hours"),
        _json_col("teaching_methods"),
        _json_col("certificates"),
        _json_col("achievements"),
        sa.Column("hourly_rate", sa.Numeric(12, 2), nullable=True),
        sa.Column("max_students_per_class", sa.Integer(), nullable=True),
        sa.Column("status", teacher_status_enum, nullable=False),
        sa.Column("available", sa.Boolean(), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("average_rating", sa.Float(), nullable=False),
        _json_col("preferences"),
        sa.UniqueConstraint("email", name="uq_teachers_email"),
    )
    op.create_index("ix_teachers_email", "teachers", ["email"])
    op.create_index("ix_teachers_status", "teachers", ["status"])

    op.create_table(
        "students",
        _user_id_pk_col(),
        _created_col(),
        _updated_col(),
        sa.Column("first_name", sa.String(length=128), nullable=False),
        sa.Column("last_name", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("gender", sa.String(length=16), nullable=True),
        sa.Column("birthdate", sa.Date(), nullable=True),
        sa.Column("education_level", sa.String(length=64), nullable=True),
        sa.Column("current_language_level", sa.String(length=64), nullable=True),
        _json_col("preferred_languages"),
        sa.Column("learning_goals", sa.Text(), nullable=True),
        sa.Column("preferred_learning_style", sa.String(length=64), nullable=True),
        _json_col("availability"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        _json_col("notification_preferences", nullable=False),
        _json_col("privacy_settings", nullable=False),
        sa.Column("status", student_status_enum, nullable=False),
        sa.UniqueConstraint("email", name="uq_students_email"),
    )
    op.create_index("ix_students_email", "students", ["email"])

    op.create_table(
        "teacher_schedule",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "teacher_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("teachers.id", ondelete="CASCADE", name="fk_teacher_schedule_teacher_id_teachers"),
            nullable=False,
        ),
        sa.Column("day", sa.String(length=16), nullable=False),
        sa.Column("start_time", sa.String(length=5), nullable=False),
        sa.Column("end_time", sa.String(length=5), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("teacher_id", "day", "start_time", name="teacher_day_start"),
    )
    op.create_index("ix_teacher_schedule_teacher_id", "teacher_schedule", ["teacher_id"])

    op.create_table(
        "bookings",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "teacher_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("teachers.id", ondelete="CASCADE", name="fk_bookings_teacher_id_teachers"),
            nullable=False,
        ),
        sa.Column(
            "student_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL", name="fk_bookings_student_id_users"),
            nullable=True,
        ),
        sa.Column("student_name", sa.String(length=255), nullable=False),
        sa.Column("student_email", sa.String(length=255), nullable=False),
        sa.Column("student_phone", sa.String(length=32), nullable=False),
        _json_col("selected_days", nullable=False),
        _json_col("selected_hours", nullable=False),
        sa.Column("session_type", sa.String(length=64), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("number_of_sessions", sa.Integer(), nullable=False),
        sa.Column("total_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("payment_status", payment_status_enum, nullable=False),
        sa.Column("transaction_id", sa.String(length=128), nullable=True),
        sa.Column("status", booking_status_enum, nullable=False),
    )
    op.create_index("ix_bookings_teacher_id", "bookings", ["teacher_id"])
    op.create_index("ix_bookings_student_id", "bookings", ["student_id"])
    op.create_index("ix_bookings_status", "bookings", ["status"])

    op.create_table(
        "teacher_wallets",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "teacher_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("teachers.id", ondelete="CASCADE", name="fk_teacher_wallets_teacher_id_teachers"),
            nullable=False,
        ),
        sa.Column("balance", sa.Numeric(12, 2), nullable=False),
        sa.Column("total_earned", sa.Numeric(12, 2), nullable=False),
        sa.UniqueConstraint("teacher_id", name="uq_teacher_wallets_teacher_id"),
    )

    op.create_table(
        "wallet_transactions",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "wallet_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("teacher_wallets.id", ondelete="CASCADE", name="fk_wallet_transactions_wallet_id_teacher_wallets"),
            nullable=False,
        ),
        sa.Column("transaction_type", wallet_transaction_type_enum, nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column(
            "booking_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("bookings.id", ondelete="SET NULL", name="fk_wallet_transactions_booking_id_bookings"),
            nullable=True,
        ),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.UniqueConstraint("booking_id", name="uq_wallet_transactions_booking_id"),
    )
    op.create_index("ix_wallet_transactions_wallet_id", "wallet_transactions", ["wallet_id"])

    op.create_table(
        "classes",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "teacher_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("teachers.id", ondelete="CASCADE", name="fk_classes_teacher_id_teachers"),
            nullable=False,
        ),
        sa.Column(
            "student_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("students.id", ondelete="CASCADE", name="fk_classes_student_id_students"),
            nullable=False,
        ),
        sa.Column("class_date", sa.Date(), nullable=False),
        sa.Column("class_time", sa.String(length=5), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", class_status_enum, nullable=False),
        sa.Column("payment_status", payment_status_enum, nullable=False),
        sa.Column("subject", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_classes_teacher_id", "classes", ["teacher_id"])
    op.create_index("ix_classes_student_id", "classes", ["student_id"])
    op.create_index("ix_classes_status", "classes", ["status"])

    op.create_table(
        "notifications",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE", name="fk_notifications_user_id_users"),
            nullable=False,
        ),
        sa.Column(
            "teacher_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("teachers.id", ondelete="SET NULL", name="fk_notifications_teacher_id_teachers"),
            nullable=True,
        ),
        sa.Column("type", notification_type_enum, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])
    op.create_index("ix_notifications_teacher_id", "notifications", ["teacher_id"])
    op.create_index("ix_notifications_read", "notifications", ["read"])

    op.create_table(
        "writing_exercises",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("prompt", sa.Text(), nullable=False),
        sa.Column("topic_category", sa.String(length=64), nullable=True),
        sa.Column("difficulty_level", sa.String(length=32), nullable=False),
        sa.Column("word_limit_min", sa.Integer(), nullable=False),
        sa.Column("word_limit_max", sa.Integer(), nullable=False),
        sa.Column("estimated_time", sa.Integer(), nullable=False),
        _json_col("evaluation_criteria", nullable=False),
        _json_col("tips", nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_writing_exercises_topic_category", "writing_exercises", ["topic_category"])
    op.create_index("ix_writing_exercises_difficulty_level", "writing_exercises", ["difficulty_level"])
    op.create_index("ix_writing_exercises_is_active", "writing_exercises", ["is_active"])

    op.create_table(
        "writing_submissions",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "student_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("students.id", ondelete="CASCADE", name="fk_writing_submissions_student_id_students"),
            nullable=False,
        ),
        sa.Column(
            "exercise_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "writing_exercises.id",
                ondelete="CASCADE",
                name="fk_writing_submissions_exercise_id_writing_exercises",
            ),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("word_count", sa.Integer(), nullable=False),
        sa.Column("character_count", sa.Integer(), nullable=False),
        sa.Column("overall_score", sa.Integer(), nullable=True),
        sa.Column("grammar_score", sa.Integer(), nullable=True),
        sa.Column("vocabulary_score", sa.Integer(), nullable=True),
        sa.Column("coherence_score", sa.Integer(), nullable=True),
        sa.Column("creativity_score", sa.Integer(), nullable=True),
        _json_col("auto_correction_data"),
        _json_col("improvement_suggestions"),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column("is_graded", sa.Boolean(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_writing_submissions_student_id", "writing_submissions", ["student_id"])
    op.create_index("ix_writing_submissions_exercise_id", "writing_submissions", ["exercise_id"])
    op.create_index("ix_writing_submissions_submitted_at", "writing_submissions", ["submitted_at"])

    op.create_table(
        "writing_statistics",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "student_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("students.id", ondelete="CASCADE", name="fk_writing_statistics_student_id_students"),
            nullable=False,
        ),
        sa.Column("total_submissions", sa.Integer(), nullable=False),
        sa.Column("total_words_written", sa.Integer(), nullable=False),
        sa.Column("average_score", sa.Float(), nullable=False),
        sa.UniqueConstraint("student_id", name="uq_writing_statistics_student_id"),
    )

    op.create_table(
        "listening_exercises",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("audio_url", sa.String(length=1024), nullable=False),
        sa.Column("transcript", sa.Text(), nullable=True),
        sa.Column("difficulty_level", sa.String(length=32), nullable=False),
        sa.Column("accent_type", sa.String(length=32), nullable=True),
        sa.Column("duration_seconds", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_listening_exercises_difficulty_level", "listening_exercises", ["difficulty_level"])
    op.create_index("ix_listening_exercises_accent_type", "listening_exercises", ["accent_type"])
    op.create_index("ix_listening_exercises_is_active", "listening_exercises", ["is_active"])

    op.create_table(
        "listening_questions",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "exercise_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "listening_exercises.id",
                ondelete="CASCADE",
                name="fk_listening_questions_exercise_id_listening_exercises",
            ),
            nullable=False,
        ),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("question_type", sa.String(length=32), nullable=False),
        _json_col("options", nullable=False),
        sa.Column("correct_answer", sa.Text(), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
    )
    op.create_index("ix_listening_questions_exercise_id", "listening_questions", ["exercise_id"])

    op.create_table(
        "listening_submissions",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "student_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("students.id", ondelete="CASCADE", name="fk_listening_submissions_student_id_students"),
            nullable=False,
        ),
        sa.Column(
            "exercise_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "listening_exercises.id",
                ondelete="CASCADE",
                name="fk_listening_submissions_exercise_id_listening_exercises",
            ),
            nullable=False,
        ),
        sa.Column("total_questions", sa.Integer(), nullable=False),
        sa.Column("correct_answers", sa.Integer(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("time_taken", sa.Integer(), nullable=True),
        sa.Column("listening_attempts", sa.Integer(), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_listening_submissions_student_id", "listening_submissions", ["student_id"])
    op.create_index("ix_listening_submissions_exercise_id", "listening_submissions", ["exercise_id"])
    op.create_index("ix_listening_submissions_submitted_at", "listening_submissions", ["submitted_at"])

    op.create_table(
        "listening_answers",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "submission_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "listening_submissions.id",
                ondelete="CASCADE",
                name="fk_listening_answers_submission_id_listening_submissions",
            ),
            nullable=False,
        ),
        sa.Column(
            "question_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "listening_questions.id",
                ondelete="CASCADE",
                name="fk_listening_answers_question_id_listening_questions",
            ),
            nullable=False,
        ),
        sa.Column("student_answer", sa.Text(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("points_earned", sa.Integer(), nullable=False),
    )
    op.create_index("ix_listening_answers_submission_id", "listening_answers", ["submission_id"])

    op.create_table(
        "articles",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=64), nullable=True),
        sa.Column("difficulty_level", sa.String(length=32), nullable=True),
        sa.Column("published_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_featured", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False),
    )
    op.create_index("ix_articles_category", "articles", ["category"])
    op.create_index("ix_articles_difficulty_level", "articles", ["difficulty_level"])
    op.create_index("ix_articles_published_date", "articles", ["published_date"])
    op.create_index("ix_articles_is_active", "articles", ["is_active"])

    op.create_table(
        "article_reading_progress",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "student_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("students.id", ondelete="CASCADE", name="fk_article_reading_progress_student_id_students"),
            nullable=False,
        ),
        sa.Column(
            "article_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("articles.id", ondelete="CASCADE", name="fk_article_reading_progress_article_id_articles"),
            nullable=False,
        ),
        sa.Column("reading_status", reading_status_enum, nullable=False),
        sa.Column("progress_percentage", sa.Integer(), nullable=False),
        sa.Column("time_spent", sa.Integer(), nullable=False),
        sa.Column("last_read_position", sa.Integer(), nullable=False),
        sa.Column("comprehension_score", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("student_id", "article_id", name="uq_article_reading_progress_student_article"),
    )
    op.create_index("ix_article_reading_progress_student_id", "article_reading_progress", ["student_id"])
    op.create_index("ix_article_reading_progress_article_id", "article_reading_progress", ["article_id"])

    op.create_table(
        "admin_actions",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column(
            "admin_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE", name="fk_admin_actions_admin_id_users"),
            nullable=False,
        ),
        sa.Column("action", sa.String(length=64), nullable=False),
        sa.Column("target_type", sa.String(length=32), nullable=False),
        sa.Column("target_id", sa.String(length=64), nullable=True),
        _json_col("payload", nullable=False),
    )
    op.create_index("ix_admin_actions_admin_id", "admin_actions", ["admin_id"])
    op.create_index("ix_admin_actions_target", "admin_actions", ["target_type", "target_id"])


def downgrade() -> None:
    op.drop_table("admin_actions")
    op.drop_table("article_reading_progress")
    op.drop_table("articles")
    op.drop_table("listening_answers")
    op.drop_table("listening_submissions")
    op.drop_table("listening_questions")
    op.drop_table("listening_exercises")
    op.drop_table("writing_statistics")
    op.drop_table("writing_submissions")
    op.drop_table("writing_exercises")
    op.drop_table("notifications")
    op.drop_table("classes")
    op.drop_table("wallet_transactions")
    op.drop_table("teacher_wallets")
    op.drop_table("bookings")
    op.drop_table("teacher_schedule")
    op.drop_table("students")
    op.drop_table("teachers")
    op.drop_table("refresh_tokens")
    op.drop_table("users")
    op.drop_table("roles")
