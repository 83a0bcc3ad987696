"""Manifest providers, naming, and loading of templated manifest files."""