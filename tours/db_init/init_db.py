"""
Database Initialization Script
Creates tables and initializes the database with sample data for development
"""

from tours.extensions import db
from tours.models import Package


def clear_database():
    """Drop all tables and recreate them"""
    print("🗑️  Dropping all tables...")
    db.drop_all()
    print("✅ Tables dropped successfully")

    print("📋 Creating tables...")
    db.create_all()
    print("✅ Tables created successfully")


def init_database(with_sample_data=True):
    """
    Initialize the database with tables and optionally sample data

    Args:
        with_sample_data (bool): Whether to populate with sample data
    """
    print("🚀 Initializing database...")

    # Create tables
    print("📋 Creating tables...")
    db.create_all()
    print("✅ Tables created successfully")

    if with_sample_data:
        print("\n📦 Creating sample data...")
        from .sample_data import (
            load_packages,
            create_sample_users,
            create_sample_settings,
            create_sample_bookings
        )
        from .sample_packages import SAMPLE_PACKAGES

        # Create data in order (respecting foreign keys)
        users = create_sample_users()
        load_packages(SAMPLE_PACKAGES)
        packages = Package.query.order_by(Package.created_at.asc()).all()
        settings = create_sample_settings()
        bookings = create_sample_bookings(users[1], packages, settings)

        print(f"\n✅ Database initialized successfully!")
        print(f"   - Users: {len(users)}")
        print(f"   - Packages: {len(packages)}")
        print(f"   - Bookings: {len(bookings)}")

        # Print test user credentials
        print("\n🔑 Test User Credentials:")
        print(f"   Email: {users[0].email} (admin)")
        print("   Password: value of ADMIN_PASSWORD")
        print("\n   Email: anu.menon@example.com")
        print("   Password: password123")
    else:
        print("✅ Database tables created (no sample data)")

    return True


def reset_database():
    """Complete database reset - drop, create, and populate"""
    print("⚠️  RESETTING DATABASE - This will delete all data!")
    clear_database()
    init_database(with_sample_data=True)
    print("\n✅ Database reset complete!")
