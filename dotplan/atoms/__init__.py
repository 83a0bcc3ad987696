"""Atoms: small units of change that plan whether to run and then execute."""