import sys

from harp_converter import convert_diatonic_to_tremolo, convert_tremolo_to_diatonic

tab = """+4 -4 +5 -5
+6 -6 +7 -7"""
result = convert_diatonic_to_tremolo(tab)

sys.stdout.write(result.converted_tab + "\n")  # "9 10 11 12\n13 14 15 16"

# Pitches the tremolo cannot play are kept as placeholders
result = convert_diatonic_to_tremolo("+4 -2 +5")
sys.stdout.write(result.converted_tab + "\n")  # "9 [-2] 11"
for warning in result.warnings:
    sys.stdout.write(f"warning: {warning}\n")

# And back again
sys.stdout.write(convert_tremolo_to_diatonic("9 12 13").converted_tab + "\n")  # "+4 -5 +6"
