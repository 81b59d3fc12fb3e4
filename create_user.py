from werkzeug.security import generate_password_hash

from extensions import get_store
from storage import UsernameTakenError


def create_user(app, username, password):
    with app.app_context():
        if app.config["STORE_BACKEND"] == "memory":
            print("⚠️  STORE_BACKEND=memory: the user only lives until this process exits.")
        try:
            user = get_store().create_user(username, generate_password_hash(password))
        except UsernameTakenError:
            print(f"⚠️  User '{username}' already exists.")
            return None
        print(f"✅ Created user: {username} (id: {user.id})")
        return user


if __name__ == '__main__':
    import argparse

    from app import create_app

    parser = argparse.ArgumentParser(description='Create a new user.')
    parser.add_argument('username', help='Username')
    parser.add_argument('password', help='Password')

    args = parser.parse_args()
    create_user(create_app(), args.username, args.password)
