"""
Chroma Lab
Color space isolation and chroma subsampling, visualized
"""

import logging
import sys


def run_gui():
    """Launch the GUI application."""
    from PySide6.QtWidgets import QApplication
    from PySide6.QtCore import Qt
    from gui.main_window import MainWindow, APP_NAME, APP_VERSION

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


def parse_cli_args(args):
    """Parse `<image_path> | --demo KEY` plus --scheme/--target/--out options."""
    options = {'image': None, 'demo': None, 'scheme': '4:2:0', 'target': 'original', 'out': '.'}
    flags = {'--demo': 'demo', '--scheme': 'scheme', '--target': 'target', '--out': 'out'}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in flags:
            if i + 1 >= len(args):
                raise ValueError(f"{arg} needs a value")
            options[flags[arg]] = args[i + 1]
            i += 2
        elif arg.startswith('--'):
            raise ValueError(f"Unknown option: {arg}")
        else:
            options['image'] = arg
            i += 1
    if options['image'] is None and options['demo'] is None:
        raise ValueError("Give an image path or --demo KEY")
    return options


def run_cli():
    """Render every view of an image to PNG files."""
    from pathlib import Path
    from models.errors import ChromaLabError
    from models.view_config import ViewConfig, SUBSAMPLING_SCHEMES
    from engines.controller import VisualizationController
    from engines.pipeline import PipelineOrchestrator
    from utils.render_surface import ArraySurface
    from utils.test_images import DEMO_IMAGES, generate_demo_image
    from utils.image_io import save_image
    from utils.metrics import compute_psnr_ssim

    args = sys.argv[2:]

    if not args or args[0] == '--help':
        print("Usage: python main.py --cli <image_path> [--scheme S] [--target T] [--out DIR]")
        print("       python main.py --cli --demo KEY [--scheme S] [--target T] [--out DIR]")
        print(f"Demo images: {', '.join(DEMO_IMAGES)}")
        sys.exit(0)

    try:
        options = parse_cli_args(args)
        if options['demo'] is not None:
            image = generate_demo_image(options['demo'], 128)
            if image is None:
                raise ValueError(f"Unknown demo image: {options['demo']}")
            print(f"Demo image: {options['demo']}")
            source_surface = ArraySurface.from_rgb(image)
        else:
            print(f"Loading: {options['image']}")
            source_surface = ArraySurface.from_image(options['image'])
        config = ViewConfig(options['target'], options['scheme'])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    out_dir = Path(options['out'])
    out_dir.mkdir(parents=True, exist_ok=True)
    source_rgb = source_surface.rgb()
    print(f"Image: {source_surface.width}x{source_surface.height}")

    try:
        source = source_surface.read_pixels()

        writers = {
            name: ArraySurface(source_surface.width, source_surface.height)
            for name in ('rgb', 'ycc', 'subsampling')
        }
        controller = VisualizationController(writers=writers)
        controller.change_source(source)

        custom = ArraySurface(source_surface.width, source_surface.height)
        PipelineOrchestrator(config, source, custom).render()

        print("\n=== Chroma loss vs. source ===")
        for scheme in SUBSAMPLING_SCHEMES:
            raster = PipelineOrchestrator(ViewConfig('original', scheme), source).render()
            metrics = compute_psnr_ssim(source_rgb, raster)
            print(f"{scheme}:  PSNR {metrics['psnr_rgb']:6.2f} dB   SSIM {metrics['ssim_rgb']:.4f}")
    except ChromaLabError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for name, surface in writers.items():
        save_image(surface.rgb(), str(out_dir / f"view_{name}.png"))
    scheme_label = (config.subsampling_scheme or 'none').replace(':', '')
    custom_path = out_dir / f"render_{config.transformation_target}_{scheme_label}.png"
    save_image(custom.rgb(), str(custom_path))

    print(f"\nSaved: {', '.join(f'view_{name}.png' for name in writers)}, {custom_path.name}")


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    if len(sys.argv) > 1 and sys.argv[1] == '--cli':
        run_cli()
    else:
        run_gui()


if __name__ == '__main__':
    main()
