import torch
from typing import Optional
from contextlib import contextmanager

from BinaryText.utils.logging import get_logger


_device: Optional[torch.device] = None

def get_device(force_cpu: bool = False) -> torch.device:
    global _device

    if force_cpu:
        return torch.device('cpu')
    
    if _device is None:
        logger = get_logger()
        if torch.cuda.is_available():
            _device = torch.device('cuda')
            logger.info(f"CUDA GPU detected: {torch.cuda.get_device_name(0)}")
        else:
            _device = torch.device('cpu')
            logger.debug("CUDA GPU not detected. Using 'cpu'.")
    
    return _device

def set_device(device: torch.device) -> None:
    global _device
    _device = device

@contextmanager
def DeviceContext(device: torch.device):
    global _device
    previous_device = _device
    _device = device
    try:
        yield
    finally:
        _device = previous_device
