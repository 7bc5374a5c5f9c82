from coachmarket.extensions import db

USERS_TABLE = "users"

ROLE_ATHLETE = "athlete"
ROLE_COACH = "coach"
USER_ROLES = (ROLE_ATHLETE, ROLE_COACH)


class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.String(20),
        db.CheckConstraint("role IN ('athlete','coach')", name="ck_users_role"),
        nullable=False,
        index=True,
    )
    coins = db.Column(
        db.Integer,
        db.CheckConstraint("coins >= 0", name="ck_users_coins_non_negative"),
        nullable=False,
        default=0,
        server_default="0",
    )
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    posts = db.relationship(
        "Post", back_populates="athlete", lazy="dynamic", order_by="Post.id"
    )
    feedback_given = db.relationship(
        "Feedback", back_populates="coach", lazy="dynamic", order_by="Feedback.id"
    )

    def __repr__(self):
        return f"<User {self.id}: {self.username} ({self.role})>"

    @property
    def is_athlete(self):
        return self.role == ROLE_ATHLETE

    @property
    def is_coach(self):
        return self.role == ROLE_COACH
