from cvforge.extensions import db
from cvforge.models import User


def seed():
    print("🌱 Seeding users...")

    users = [
        User(
            email="demo@example.com",
            first_name="Dina",
            last_name="Pratama",
            phone="+62 812 0000 0000",
            location="Jakarta, Indonesia",
            headline="Backend Engineer",
            summary="Backend engineer focused on Python services and data-heavy APIs.",
            linkedin_url="https://www.linkedin.com/in/demo",
            github_url="https://github.com/demo",
        ),
        User(
            email="second@example.com",
            first_name="Raka",
            last_name="Wijaya",
            headline="Data Analyst",
        ),
    ]

    # prevent duplicates
    for user in users:
        existing = User.query.filter_by(email=user.email).first()
        if not existing:
            db.session.add(user)

    db.session.commit()
    print("✅ Users seeded successfully!")
