"""
Utils package.

Parsing stages for OFX documents. Every stage is a pure function of its
input:
- source_loader: str / bytes / file handle / path -> decoded text
- format_sniffer: top-level <OFX> marker check and dialect detection
- block_extractor: document -> raw <STMTTRN> blocks
- field_extractor: raw block -> raw field strings
- normalizers: raw field strings -> date / Decimal
"""
