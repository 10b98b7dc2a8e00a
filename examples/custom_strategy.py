"""Template for implementing a custom strategy.

This example demonstrates the complete pattern for plugging your own
id and snippet generation into the pipeline:
- Id generator and copypasta generator functions
- Registration with StrategyRegistry
- An in-memory source and writer, no filesystem needed
"""

from typing import Any

from svg_viewer_assets import MemorySource, MemoryWriter, Strategy, StrategyRegistry


# Step 1: Define how ids are derived from (extension-less) relative paths
def component_id(path: str, id_gen_opts: Any = None) -> str:
    """Turn "arrows/chevron-left" into "ArrowsChevronLeft"."""
    words = path.replace("/", "-").split("-")
    return "".join(word.capitalize() for word in words if word)


# Step 2: Define the usage snippet for an id
def component_copypasta(asset_id: str) -> str:
    return f"<{asset_id}Icon />"


# Step 3: Register the strategy
StrategyRegistry.register(Strategy("component", component_id, component_copypasta))


# Step 4: Use your strategy
def main():
    """Example usage of a custom strategy."""
    print("Custom Strategy Example")
    print("=" * 50)

    source = MemorySource({
        "arrows/chevron-left.svg": '<svg viewBox="0 0 16 16"><path d="M10 4 6 8l4 4"/></svg>',
        "__original__/arrows/chevron-left.svg": (
            '<svg width="16" height="16" viewBox="0 0 16 16">'
            '<path d="M10 4 L6 8 L10 12"/></svg>'
        ),
    })
    writer = MemoryWriter()

    pipeline = StrategyRegistry.create_pipeline(
        "component", source, output_file="components.json", writer=writer
    )

    for item in pipeline.build():
        print(f"\n✓ {item['fileDir']}/{item['fileName']}")
        print(f"  Usage: {item['copypasta']}")
        print(f"  Size: {item['fileSize']} -> {item['optimizedFileSize']}")

    print(f"\nManifest: {writer.files['components.json'][:80]}...")


if __name__ == "__main__":
    main()
