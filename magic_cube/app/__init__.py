# magic_cube/app/__init__.py
