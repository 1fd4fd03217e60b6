"""CLI entry point for Photo Strip."""

import argparse
import logging
import sys

from photo_strip import __version__


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-strip",
        description="Render a printable two-copy photo strip with QR codes linking to the photos.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Strip with both links
  python -m photo_strip --original shot.jpg --stylized styled.jpg \\
    --original-link "https://example.com/p/1" --stylized-link "https://example.com/p/1s"

  # Custom logo, JPEG output for the printer
  python -m photo_strip --original shot.jpg --stylized styled.jpg \\
    --logo event_logo.png -o strip.jpg
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Required
    parser.add_argument(
        "--original",
        required=True,
        help="Path to the original photo",
    )
    parser.add_argument(
        "--stylized",
        required=True,
        help="Path to the stylized photo",
    )

    # Optional — links
    parser.add_argument(
        "--original-link",
        default="",
        help="URL of the hosted original photo (QR code and caption)",
    )
    parser.add_argument(
        "--stylized-link",
        default="",
        help="URL of the hosted stylized photo (QR code and caption)",
    )

    # Optional — input/output
    parser.add_argument(
        "--logo",
        default=None,
        help="Path to a logo image (default: bundled logo)",
    )
    parser.add_argument(
        "--output", "-o",
        default="photo_strip.png",
        help="Output image path (default: photo_strip.png)",
    )

    # Flags
    parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip QR code scannability verification of the output",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite output file without prompting",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    import os
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Lazy imports for faster --help
    from photo_strip import STRIP_WIDTH
    from photo_strip.image_utils import (
        load_photo, load_logo, save_output,
        verify_qr_scannable, VerifyResult,
    )
    from photo_strip.strip_builder import PhotoStripSpec, build_photo_strip

    print(f"Photo Strip v{__version__}")
    print("=" * 50)

    # ------------------------------------------------------------------
    # Check output overwrite
    # ------------------------------------------------------------------
    if os.path.exists(args.output) and not args.overwrite:
        response = input(f"  Output file '{args.output}' already exists. Overwrite? [y/N] ")
        if response.lower() not in ("y", "yes"):
            print("  Aborted.")
            return 0

    try:
        # Step 1: Load photos
        print(f"\n[1/3] Loading photos")
        original = load_photo(args.original, size=STRIP_WIDTH)
        stylized = load_photo(args.stylized, size=STRIP_WIDTH)
        logo = load_logo(args.logo)
        print(f"  ✓ Photos center-cropped to {STRIP_WIDTH}x{STRIP_WIDTH}")

        # Step 2: Render
        print(f"\n[2/3] Rendering strip")
        spec = PhotoStripSpec(
            original_image=original,
            stylized_image=stylized,
            original_qr_link=args.original_link,
            stylized_qr_link=args.stylized_link,
        )
        for label, qr in (
            ("original", spec.original_qr_image),
            ("stylized", spec.stylized_qr_image),
        ):
            if qr is None:
                print(f"  ⚠️  WARNING: {label} link too long for a QR code, omitted.", file=sys.stderr)
        strip = build_photo_strip(spec, logo=logo)
        print(f"  ✓ Strip rendered ({strip.width}x{strip.height})")

        # Step 3: Save and verify
        print(f"\n[3/3] Saving output to: {args.output}")
        output_path = save_output(strip, args.output)
        print(f"  ✓ Saved: {output_path}")

        if not args.no_verify:
            print(f"\n  Verifying QR code scannability...")
            result, decoded = verify_qr_scannable(strip)
            if result == VerifyResult.SCANNABLE:
                print(f"  ✓ {len(decoded)} QR code(s) SCANNABLE: {', '.join(sorted(set(decoded)))}")
            elif result == VerifyResult.SKIPPED:
                print(f"  ⊘ Verification skipped (pyzbar not installed)")
                print(f"    Install with: pip install pyzbar")
            else:
                print(f"  ⚠️  WARNING: no QR code could be decoded from the strip.")

        print(f"\n✅ Done! Your photo strip is at: {output_path}")
        return 0

    except (ValueError, FileNotFoundError) as e:
        print(f"\n  ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
