# magic_cube/render/__init__.py
