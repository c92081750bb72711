"""
Example 01: Querying a JSON-LD Profile
=======================================

Loads a self-describing profile document, then reads it the way a
view renderer would: types first, then single and multi-valued
properties, following embedded and referenced nodes.

Use case: A profile pane that needs the person's name, friends and
address without walking the raw JSON.
"""

from json_os import JsonOs, namespace

SCHEMA = namespace("http://schema.org/")

profile = {
    "@context": {"schema": "https://schema.org/"},
    "@id": "#me",
    "@type": "schema:Person",
    "@view": "https://example.org/panes/profile.js",
    "schema:name": "Ada Lovelace",
    "schema:knows": [
        {"@id": "https://example.org/babbage#me"},
        {"schema:name": "Mary Somerville"},
    ],
    "schema:address": {"schema:addressLocality": "London"},
}

# ── 1. Loading ───────────────────────────────────────────────────

print("=== 1. Loading ===\n")

result = JsonOs().load(profile, "https://example.org/ada.html")
print(f"Subject: {result.subject.uri}")
print(f"View:    {result.view}")
print(f"Triples: {len(result.store)}")

# ── 2. Types ─────────────────────────────────────────────────────

print("\n=== 2. Types ===\n")

types = result.store.find_type_uris(result.subject)
# schema.org types answer to both schemes
print(f"Person (http):  {'http://schema.org/Person' in types}")
print(f"Person (https): {'https://schema.org/Person' in types}")

# ── 3. Properties ────────────────────────────────────────────────

print("\n=== 3. Properties ===\n")

store = result.store
print(f"Name: {store.any_value(result.subject, SCHEMA('name'))}")

for friend in store.each(result.subject, SCHEMA("knows")):
    name = store.any_value(friend, SCHEMA("name"))
    print(f"Knows: {friend.uri} ({name or 'external reference'})")

address = store.any(result.subject, SCHEMA("address"))
print(f"City: {store.any_value(address, SCHEMA('addressLocality'))}")

# ── 4. Debugging ─────────────────────────────────────────────────

print("\n=== 4. N-Triples ===\n")

print(store.to_ntriples())
