"""
Use Cases

Organized into domain folders:
- sessions/: Session cookie tokens
- password_resets/: Password reset tokens
- auth/: Signup and sign-in
- users/: Account changes
- galleries/: Gallery CRUD

Import from subdirectories.
"""
