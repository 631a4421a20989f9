# utils/__init__.py
"""
Pure password helpers: policy checks and generation (password_utils),
bcrypt hashing (auth_utils).
"""
