from pathlib import Path

from brickwall.assets.procedural import CLAY, GROUND, grain_texture, save_texture


def generate_maps():
    # Settings for the demo tiles
    W, H = 256, 256

    out_path = Path("assets/textures")

    save_texture(grain_texture(CLAY, W, H, variation=24, seed=1), out_path / "clay.png")
    save_texture(
        grain_texture(GROUND, W, H, variation=12, speckle=0.1, seed=2),
        out_path / "ground.png",
    )
    print(f"Generated {W}x{H} clay.png and ground.png in {out_path}")


if __name__ == "__main__":
    generate_maps()
