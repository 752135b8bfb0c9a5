#!/usr/bin/env python3
"""
Example usage of paste-json.

This script infers class declarations for a small blog document in
every supported target notation.
"""

import json

from paste_json import ClassGenerator, GenerationError, TargetLanguage


def main():
    """Main example function."""
    print("paste-json Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        "users": [
            {
                "name": "Alice Johnson",
                "email": "alice@example.com",
                "profile": {"age": 30, "city": "New York"}
            },
            {
                "name": "Bob Smith",
                "profile": {"age": 25.5, "city": "San Francisco"},
                "nickname": None
            }
        ],
        "posts": [
            {
                "id": 1,
                "author": "user_001",
                "tags": ["introduction", "hello"],
                "location": {"age": 1, "city": "Berlin"}
            }
        ],
        "config": {
            "version": "1.0.0",
            "features": {"user_registration": True, "post_comments": True},
            "banned": []
        }
    }

    json_string = json.dumps(sample_data, indent=2)
    print(f"Input JSON size: {len(json_string)} characters\n")

    for target in TargetLanguage:
        generator = ClassGenerator(target=target, enable_profiling=True)
        try:
            result = generator.generate_from_string(json_string)
        except GenerationError as e:
            print(f"❌ {target.value}: {e}")
            continue

        print(f"--- {target.value} ({result.class_count} classes) ---")
        print(result.text)
        for line in generator.profiler.format_summary():
            print(line)
        print()

    # Top-level arrays have no object to describe
    try:
        ClassGenerator().generate_from_string("[1, 2, 3]")
    except GenerationError as e:
        print(f"❌ Expected failure ({e.error_type.value}): {e}")


if __name__ == "__main__":
    main()
