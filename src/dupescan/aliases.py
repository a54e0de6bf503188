from dupescan.core.models import Precision

PROG_DESCRIPTION = "dupescan - find duplicate files in a directory"

PRECISION_CHOICES = [precision.value for precision in Precision]

PRECISION_HELP_TEXT = "Levels of precision:\n" + "".join(
    f"  {precision.value} : {precision.description}"
    f"{' (default)' if precision is Precision.BYTE_EXACT else ''}\n"
    for precision in Precision
)

SIZE_HELP_TEXT = (
    "Only examine files of certain sizes:\n"
    "  -500  : smaller than 500 bytes\n"
    "  +200M : larger than 200 MB\n"
    "  500K  : exactly 500 KB\n"
    "Use --size=-1G when the value starts with '-' and has a unit\n"
)

EPILOG_TEXT = """
Examples:
  Find byte-identical files in Downloads
  %(prog)s ~/Downloads

  Whole tree, files larger than 1 MB, compare by checksum
  %(prog)s -r --size +1M --precision 1 ~/Downloads

  Only JPEG files, quick length-only comparison
  %(prog)s -r -R '.*\\.jpe?g' -p 0 ~/Pictures

  Everything except log files
  %(prog)s -R '.*\\.log' --invert-regex /var/tmp
"""

PARSE_ERROR_HEADER = "The following errors occurred while parsing your command:\n\n"
