import os
import random

# ---------------------------
# Configuration Variables
# ---------------------------
FILE_SIZE = 1000  # exact file size in bytes
OUTPUT_FOLDER = 'experiments_data/patterns'
SEED = 42

FILE1 = 'file1_ones.bin'
FILE2 = 'file2_pattern123.bin'
FILE3 = 'file3_growing_pattern.bin'
FILE4 = 'file4_skewed_text.txt'
FILE5 = 'file5_random.bin'

file_names = [FILE1, FILE2, FILE3, FILE4, FILE5]


def full_path(filename):
    return os.path.join(OUTPUT_FOLDER, filename)


def single_byte_data():
    # One distinct byte, the degenerate single leaf tree.
    return b'\x01' * FILE_SIZE


def repeating_pattern_data():
    pattern = bytes([1, 2, 3])
    return (pattern * ((FILE_SIZE // len(pattern)) + 1))[:FILE_SIZE]


def growing_pattern_data():
    # Groups [0], [0, 1], [0, 1, 2], ... up to [0, ..., 255], then again from [0].
    evolving = bytearray()
    group = 1
    while len(evolving) < FILE_SIZE:
        evolving.extend(bytes(range(group)))
        group += 1
        if group > 256:
            group = 1
    return bytes(evolving[:FILE_SIZE])


def skewed_text_data(rng):
    # Letter weights roughly follow English, so code lengths differ a lot.
    letters = 'etaoinshrdlu '
    weights = [12, 9, 8, 7, 7, 6, 6, 6, 5, 4, 4, 3, 18]
    return ''.join(rng.choices(letters, weights=weights, k=FILE_SIZE)).encode('ascii')


def random_data(rng):
    return bytes(rng.randrange(256) for _ in range(FILE_SIZE))


def main():
    rng = random.Random(SEED)
    os.makedirs(OUTPUT_FOLDER, exist_ok=True)

    generators = {
        FILE1: single_byte_data,
        FILE2: repeating_pattern_data,
        FILE3: growing_pattern_data,
        FILE4: lambda: skewed_text_data(rng),
        FILE5: lambda: random_data(rng),
    }

    for fname in file_names:
        path = full_path(fname)
        if os.path.exists(path):
            os.remove(path)
            print(f"Deleted existing file: {path}")
        with open(path, 'wb') as f:
            f.write(generators[fname]())
        print(f"Generated {fname}")

    print("All files generated successfully in folder:", OUTPUT_FOLDER)


if __name__ == '__main__':
    main()
