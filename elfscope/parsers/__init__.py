"""
ELFScope Parsers
=================

Identification sniffing, file-header decoding, program-header table
reading, and the code tables used to name raw ELF field values.
"""
