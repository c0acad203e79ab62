#!/usr/bin/env python3
"""
Example usage of the JSON property converter.

Converts a small scene description to Gameplay3D property text, once in
memory and once through files.
"""

import json
import tempfile
from pathlib import Path
from json_properties import ArrayNaming, JSONPropertyConverter


def main():
    """Main example function."""
    print("JSON Property Converter Example")
    print("=" * 50)

    scene = {
        "scene": {
            "path": "res/box.gpb",
            "activeCamera": "camera",
            "node": {
                "url": "box",
                "material": "res/box.material",
                "collisionObject": {"type": "RIGID_BODY", "shape": "BOX", "mass": 1.0}
            }
        },
        "lights": [
            {"type": "DIRECTIONAL", "color": [1.0, 0.9, 0.8]},
            {"type": "POINT", "range": 10}
        ]
    }

    converter = JSONPropertyConverter()
    print(converter.convert_string(json.dumps(scene)))

    print("With array elements named by their first key:")
    print("-" * 50)
    first_key = JSONPropertyConverter(array_naming=ArrayNaming.FIRST_KEY)
    print(first_key.convert_string(json.dumps({"passes": [{"forward": {"depth": True}}]})))

    with tempfile.TemporaryDirectory() as temp_dir:
        input_path = Path(temp_dir) / "scene.json"
        output_path = Path(temp_dir) / "box.scene"
        input_path.write_text(json.dumps(scene), encoding="utf-8")

        result = converter.convert_file(input_path, output_path)
        if result.success:
            print(f"Wrote {result.line_count} lines ({result.block_count} blocks, "
                  f"{result.value_count} values) to {output_path.name}")
        else:
            for error in result.errors or []:
                print(f"error: {error}")


if __name__ == "__main__":
    main()
