ERRORS = {
  "E_INDEX_MISSING": "EDID index file missing",
  "E_INDEX_SCHEMA": "EDID index unreadable or missing columns",
  "E_FILE_MISSING": "Extracted EDID file missing",
  "E_SIZE_MISMATCH": "Extracted EDID file size does not match index",
  "E_HASH_MISMATCH": "Extracted EDID content hash does not match index",
}
