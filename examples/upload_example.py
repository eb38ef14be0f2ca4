#!/usr/bin/env python3
"""
Example usage of the modelhost client.

Uploads a model archive, waits for the service to finish processing it,
then publishes it.
"""
import asyncio
import os
import sys
from pathlib import Path

from modelhost import ModelApiClient, ProcessingStatus, UploadModelRequest
from modelhost.core.logging import setup_logging

# API Configuration
API_TOKEN = os.getenv("MODELHOST_TOKEN", "")
POLL_INTERVAL_SEC = 5


async def upload_and_publish(model_path: str):
    """
    Upload a model and publish it once processed.
    
    Args:
        model_path: Path to the model file or zip archive
    
    Returns:
        str: The model uid, or None if the upload was rejected
    """
    print(f"\n📦 Uploading model: {model_path}")
    print("=" * 60)
    
    request = UploadModelRequest(
        file_path=model_path,
        source="modelhost-example",
        name=Path(model_path).stem,
        tags=["example"],
        is_published=False,
    )
    
    async with ModelApiClient() as client:
        response = await client.upload_model(request, API_TOKEN)
        
        if not response.is_success:
            print(f"❌ Error: {response.status_code} {response.message}")
            return None
        
        print(f"✅ Uploaded as {request.model_id}")
        
        model = await client.get_model(request.model_id)
        while not model.is_ready():
            if model.status.processing == ProcessingStatus.FAILED:
                print(f"❌ Processing failed: {model.status.error}")
                return None
            print(f"⏳ {model.status.processing.value}...")
            await asyncio.sleep(POLL_INTERVAL_SEC)
            model = await client.get_model(request.model_id)
        
        request.is_published = True
        await client.update_model(request.model_id, request, API_TOKEN)
        print("🚀 Published")
    
    return request.model_id


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("\nUsage:")
        print("  MODELHOST_TOKEN=<token> python upload_example.py <model_path>")
        sys.exit(1)
    
    setup_logging()
    asyncio.run(upload_and_publish(sys.argv[1]))
