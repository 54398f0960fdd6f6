"""Pick generation options from a source image."""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import create_color

# Clusters below this saturation are treated as greys
MIN_SEED_SATURATION = 10


def extract_colors(image_path, n_colors=8):
    """Extract dominant colors using k-means clustering"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove near-black and near-white pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]
    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)

    # Largest clusters first
    counts = np.bincount(kmeans.labels_, minlength=n_clusters)
    order = np.argsort(counts)[::-1]
    return [create_color(*(int(c) for c in kmeans.cluster_centers_[i])) for i in order]


def find_average_color(image_path):
    """Get overall average color of image"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((100, 100))
    avg = np.array(img).reshape(-1, 3).mean(axis=0)
    return create_color(int(avg[0]), int(avg[1]), int(avg[2]))


def base_hue_from_image(image_path, n_colors=8):
    """Hue of the most saturated dominant color in the image.

    Falls back to the largest cluster when every cluster is near grey.
    """
    colors = extract_colors(image_path, n_colors)
    vivid = [c for c in colors if c.hsl[1] >= MIN_SEED_SATURATION]
    if not vivid:
        return colors[0].hsl[0]
    return max(vivid, key=lambda c: c.hsl[1]).hsl[0]


def options_from_image(image_path, n_colors=8):
    """Partial options from an image: base hue, and dark mode for dark images."""
    return {
        "base_hue": base_hue_from_image(image_path, n_colors),
        "is_dark": find_average_color(image_path).luminance < 0.5,
    }
