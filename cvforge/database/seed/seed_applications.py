from datetime import datetime, timedelta

from cvforge.extensions import db
from cvforge.models import User, JobApplication


def seed():
    print("🌱 Seeding job applications...")

    user = User.query.filter_by(email="demo@example.com").first()
    if not user:
        print("⚠️ Demo user missing, run the user seeder first")
        return

    now = datetime.utcnow()
    applications = [
        JobApplication(
            user_id=user.id,
            company="Initech",
            position="Platform Engineer",
            link="https://jobs.example.com/initech/platform",
            status="applied",
            applied_at=now - timedelta(days=5),
        ),
        JobApplication(
            user_id=user.id,
            company="Umbrella",
            position="Backend Engineer",
            status="interview",
            applied_at=now - timedelta(days=20),
            last_contact_at=now - timedelta(days=2),
            notes="Second round scheduled.",
        ),
        JobApplication(user_id=user.id, company="Hooli", position="Staff Engineer", status="draft"),
    ]

    # prevent duplicates
    for application in applications:
        existing = JobApplication.query.filter_by(
            user_id=user.id, company=application.company, position=application.position
        ).first()
        if not existing:
            db.session.add(application)

    db.session.commit()
    print("✅ Job applications seeded successfully!")
