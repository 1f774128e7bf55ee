from datetime import date

from cvforge.extensions import db
from cvforge.models import User, LibraryWorkExperience, LibraryEducation, LibrarySkill, LibraryProject


def seed():
    print("🌱 Seeding profile library...")

    user = User.query.filter_by(email="demo@example.com").first()
    if not user:
        print("⚠️ Demo user missing, run the user seeder first")
        return
    if LibraryWorkExperience.query.filter_by(user_id=user.id).first():
        print("⚠️ Library already seeded, skipping")
        return

    db.session.add_all([
        LibraryWorkExperience(
            user_id=user.id,
            company="Acme",
            role="Senior Engineer",
            location="Jakarta",
            start_date=date(2021, 3, 1),
            is_current=True,
            description="Own the billing platform and its public API.",
        ),
        LibraryWorkExperience(
            user_id=user.id,
            company="Globex",
            role="Software Engineer",
            start_date=date(2018, 7, 1),
            end_date=date(2021, 2, 28),
            description="Built internal tooling for the logistics team.",
        ),
        LibraryEducation(
            user_id=user.id,
            school="Institut Teknologi Sepuluh Nopember",
            degree="B.Sc.",
            field="Informatics",
            start_date=date(2014, 8, 1),
            end_date=date(2018, 6, 30),
        ),
        LibrarySkill(user_id=user.id, name="Python", level="expert", category="Languages"),
        LibrarySkill(user_id=user.id, name="PostgreSQL", level="advanced", category="Databases"),
        LibrarySkill(user_id=user.id, name="Docker", level="intermediate", category="Tooling"),
        LibraryProject(
            user_id=user.id,
            name="cvforge",
            description="CV composer with immutable per-application snapshots.",
            link="https://github.com/demo/cvforge",
            tech=["Python", "Flask", "SQLAlchemy"],
        ),
    ])
    db.session.commit()
    print("✅ Library seeded successfully!")
