"""Binary Canonical Serialization: base64 and ULEB128 helpers, field tags, integer types, encoder and decoder."""