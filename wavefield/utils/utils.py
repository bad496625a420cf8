import numpy as np
from scipy.signal import find_peaks


def find_first_arrival(signal: np.ndarray, threshold_ratio: float = 0.1) -> int:
    """
    Detect the first significant peak in a signal (direct wave arrival).

    Parameters
    ----------
    signal : np.ndarray
        Input time-domain signal.
    threshold_ratio : float, default=0.1
        Minimum peak height as fraction of global maximum.

    Returns
    -------
    int
        Index of first arrival. Falls back to global maximum if no peaks found.
    """
    max_val = np.max(signal)
    min_height = max_val * threshold_ratio

    peaks, _ = find_peaks(signal, height=min_height, distance=5)

    if len(peaks) > 0:
        return int(peaks[0])
    else:
        return int(np.argmax(signal))
