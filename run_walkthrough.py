from rosterfold.data.sample import SAMPLE_ROSTER
from rosterfold.functional import each_entry, resolve_fold, transform_fold

if __name__ == "__main__":
    # Enumerate: one [band, members] line per pair, in roster order
    each_entry(SAMPLE_ROSTER)
    print()

    # Transform: same bands, members sorted
    each_entry(transform_fold(SAMPLE_ROSTER))
    print()

    # Resolve: earliest member across every band
    print(resolve_fold(SAMPLE_ROSTER))
