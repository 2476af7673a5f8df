"""MinGW linker driver.

Provides `mingw-ld` command line interface which accepts GNU ld arguments and links with `lld-link`.
"""
