"""State persistence for grid recovery"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger


class StatePersistence:
    """Handles saving and loading grid state as JSON files"""

    def __init__(self, state_dir: str = "state"):
        self.state_dir = Path(state_dir)
        self.state_dir.mkdir(parents=True, exist_ok=True)

    def _state_file(self, name: str) -> Path:
        # Clean name for filename
        clean_name = name.replace('/', '_').replace(':', '_')
        return self.state_dir / f"{clean_name}_state.json"

    def save_state(self, name: str, state: Dict[str, Any]) -> bool:
        """Save grid state to disk. `state` must already hold JSON types only."""
        payload = dict(state)
        payload['_metadata'] = {
            'saved_at': datetime.now().isoformat(),
            'name': name,
            'version': '1.0'
        }

        try:
            with open(self._state_file(name), 'w') as f:
                json.dump(payload, f, indent=2)
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save state for {name}: {e}")
            return False

        logger.debug(f"State saved for {name}")
        return True

    def load_state(self, name: str) -> Optional[Dict[str, Any]]:
        """Load grid state from disk, without its metadata"""
        state_file = self._state_file(name)
        if not state_file.exists():
            logger.debug(f"No saved state found for {name}")
            return None

        try:
            with open(state_file, 'r') as f:
                state = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load state for {name}: {e}")
            return None

        metadata = state.pop('_metadata', {})
        logger.info(f"State loaded for {name} (saved at {metadata.get('saved_at')})")
        return state

    def delete_state(self, name: str) -> bool:
        """Delete saved state"""
        state_file = self._state_file(name)
        if not state_file.exists():
            return False

        state_file.unlink()
        logger.info(f"State deleted for {name}")
        return True

    def list_saved_states(self) -> List[Dict[str, Any]]:
        """List all saved states"""
        states = []
        for state_file in sorted(self.state_dir.glob("*_state.json")):
            try:
                with open(state_file, 'r') as f:
                    metadata = json.load(f).get('_metadata', {})
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable state file {state_file}: {e}")
                continue
            states.append({
                'name': metadata.get('name'),
                'saved_at': metadata.get('saved_at'),
                'file': str(state_file)
            })
        return states
