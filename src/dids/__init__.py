"""
┌──────────────────────────────┐
│   DID state resolver         │
│  (external – operation log)  │
│                              │
│ - orders operations          │
│ - enforces single-use        │
│   commitments                │
└──────────────▲───────────────┘
               │ immutable Operation
┌──────────────┴───────────────┐
│   Operation parsers          │
│                              │
│ - create / update            │
│ - recover / deactivate       │
│ - exact property sets        │
│ - signed-data cross-checks   │
│ - delta & document patches   │
└──────────────▲───────────────┘
               │
┌──────────────┴───────────────┐
│  Proof & Crypto Engine       │
│                              │
│ - base64url codec            │
│ - multihash / commitments    │
│ - ES256K JWK & compact JWS   │
│ - JCS canonicalization       │
└──────────────────────────────┘
"""
