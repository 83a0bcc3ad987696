"""Atoms that create, fill, copy, link and check permissions of files."""