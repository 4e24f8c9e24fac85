"""
Seed the lookup tables and, optionally, the first admin account.

Run this after "alembic upgrade head", from the project root:
    python seed_lookups.py
    python seed_lookups.py --admin-email admin@example.com --admin-password 'S3cure-pass' --admin-name Admin
"""

import argparse
import os
import sys

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.database import SessionLocal
from app.crud import admin as admin_crud
from app.crud import lookup as lookup_crud
from app.models.admin import AdminRole
from app.schemas.admin import AdminCreateRequest


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed lookup tables and the first admin")
    parser.add_argument("--admin-email", help="Create a super admin with this email")
    parser.add_argument("--admin-password", help="Password for the new admin (8-72 characters)")
    parser.add_argument("--admin-name", default="Admin", help="First name of the new admin")
    args = parser.parse_args(argv)

    if args.admin_email and not args.admin_password:
        parser.error("--admin-password is required with --admin-email")

    db = SessionLocal()
    try:
        inserted = lookup_crud.seed_defaults(db)

        print(f"\n{'='*60}")
        print("Lookup tables seeded")
        print(f"{'='*60}")
        for table, count in inserted.items():
            print(f"  {table}: {count} new rows")

        if args.admin_email:
            if admin_crud.get_by_email(db, args.admin_email):
                print(f"\nAdmin {args.admin_email} already exists, skipping")
            else:
                admin = admin_crud.create(db, AdminCreateRequest(
                    email=args.admin_email,
                    password=args.admin_password,
                    first_name=args.admin_name,
                    role=AdminRole.SUPER_ADMIN,
                ))
                print(f"\n✓ Created super admin {admin.email}")

        return 0

    except Exception as e:
        db.rollback()
        print(f"\n❌ Seeding failed: {e}")
        print("\nPlease check:")
        print("  1. Database is running")
        print("  2. Migrations are applied (alembic upgrade head)")
        return 1

    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
