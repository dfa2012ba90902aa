from sqlmodel import Session, select

from has_status.db.session import get_engine, init_db, check_connection
from has_status.models import Client


def verify_database():
    print("--- Database Verification ---")
    engine = get_engine()
    try:
        # This will create tables if they don't exist
        print("Attempting to create tables...")
        init_db(engine)
        print("Table creation/verification successful.")

        with Session(engine) as session:
            if not check_connection(session):
                print("Database connection test: FAILED")
                return
            session.exec(select(Client).limit(1)).first()
            print("Database connection test: SUCCESS")

    except Exception as e:
        print(f"Database connection test: FAILED")
        print(f"Error: {e}")
        if "sshtunnel" in str(e).lower():
            print("\nTIP: Make sure your SSH credentials in .env are correct and you are not blocked by a firewall.")
        elif "mysql" in str(e).lower():
            print("\nTIP: Ensure the database server is running and the user has correct permissions.")


if __name__ == "__main__":
    verify_database()
