# magic_cube/logic/__init__.py
