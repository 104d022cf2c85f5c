"""
Setup script to create database tables and, optionally, a user to sign in with.

    python setup_db.py
    python setup_db.py --email you@example.com --password secret --name "You"
"""
import argparse
import sys
from sqlalchemy import inspect
from newsletter_writer.database import engine, Base, SessionLocal
from newsletter_writer.models import User
from newsletter_writer.config import get_settings
from newsletter_writer.auth import get_password_hash


def create_user(email: str, password: str, name: str | None = None) -> User:
    """Create a user, or reset the password of an existing one."""
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email.strip().lower()).first()
        if user:
            print(f"🔁 User {user.email} exists, updating password")
        else:
            user = User(email=email.strip().lower(), name=name)
            db.add(user)
        user.hashed_password = get_password_hash(password)
        user.is_active = True
        db.commit()
        db.refresh(user)
        return user
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create newsletter tables and an optional user")
    parser.add_argument("--email", help="Email of a user to create")
    parser.add_argument("--password", help="Password for that user")
    parser.add_argument("--name", help="Display name", default=None)
    args = parser.parse_args(argv)

    if bool(args.email) != bool(args.password):
        parser.error("--email and --password must be given together")

    try:
        settings = get_settings()
        print(f"🔌 Connecting to database...")
        print(f"   URL: {settings.get_database_url()[:30]}...")

        print(f"\n📦 Creating tables...")
        Base.metadata.create_all(bind=engine)
        print(f"✅ Tables created successfully!")

        print(f"\n📋 Tables in database:")
        for table in sorted(inspect(engine).get_table_names()):
            print(f"   - {table}")

        if args.email:
            user = create_user(args.email, args.password, args.name)
            print(f"\n👤 User ready: {user.email} ({user.id})")

        print(f"\n🎉 Database setup complete!")

    except Exception as e:
        print(f"❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
