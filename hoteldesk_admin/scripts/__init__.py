"""
HotelDesk Admin - Scripts Package

One module per operator script; each exposes main(argv) returning an exit code.
"""
