"""Respuestas JSON de ejemplo de la API."""

from __future__ import annotations

from datetime import datetime, timezone

TEST_ACCOUNT_ID = "01a7362d577a6c3019a474fd6f485823"
TEST_ZONE_ID = "023e105f4ecef8ad9ca31a8372d0c353"
TEST_VIDEO_ID = "ea95132c15732412d22c1476fa83f27a"

TEST_TIMESTAMP = datetime(2014, 1, 2, 2, 20, tzinfo=timezone.utc)

VIDEO_JSON = """{
    "allowedOrigins": ["example.com"],
    "created": "2014-01-02T02:20:00Z",
    "duration": 300.5,
    "input": {"height": 1080, "width": 1920},
    "maxDurationSeconds": 300,
    "meta": {"name": "My First Stream Video"},
    "modified": "2014-01-02T02:20:00Z",
    "uploadExpiry": "2014-01-02T02:20:00Z",
    "playback": {
      "hls": "https://videodelivery.net/ea95132c15732412d22c1476fa83f27a/manifest/video.m3u8",
      "dash": "https://videodelivery.net/ea95132c15732412d22c1476fa83f27a/manifest/video.mpd"
    },
    "preview": "https://watch.cloudflarestream.com/ea95132c15732412d22c1476fa83f27a",
    "readyToStream": true,
    "requireSignedURLs": true,
    "size": 4190963,
    "status": {
      "state": "inprogress",
      "pctComplete": "51",
      "errorReasonCode": "ERR_NON_VIDEO",
      "errorReasonText": "The file was not recognized as a valid video file."
    },
    "thumbnail": "https://videodelivery.net/ea95132c15732412d22c1476fa83f27a/thumbnails/thumbnail.jpg",
    "thumbnailTimestampPct": 0.529241,
    "uid": "ea95132c15732412d22c1476fa83f27a",
    "creator": "creator-id_abcde12345",
    "liveInput": "fc0a8dc887b16759bfd9ad922230a014",
    "uploaded": "2014-01-02T02:20:00Z",
    "watermark": {
      "uid": "ea95132c15732412d22c1476fa83f27a",
      "size": 29472,
      "height": 600,
      "width": 400,
      "created": "2014-01-02T02:20:00Z",
      "downloadedFrom": "https://company.com/logo.png",
      "name": "Marketing Videos",
      "opacity": 0.75,
      "padding": 0.1,
      "scale": 0.1,
      "position": "center"
    },
    "nft": {
      "contract": "0x57f1887a8bf19b14fc0d912b9b2acc9af147ea85",
      "token": 5
    }
}"""

SINGLE_STREAM_RESPONSE = (
    '{"success": true, "errors": [], "messages": [], "result": ' + VIDEO_JSON + "}"
)

LIST_STREAM_RESPONSE = (
    '{"success": true, "errors": [], "messages": [], "result": ['
    + VIDEO_JSON
    + '], "result_info": {"page": 1, "per_page": 20, "count": 1, "total_count": 1}}'
)

DIRECT_UPLOAD_RESPONSE = """{
  "success": true,
  "errors": [],
  "messages": [],
  "result": {
    "uploadURL": "www.example.com/samplepath",
    "uid": "ea95132c15732412d22c1476fa83f27a",
    "watermark": {
      "uid": "ea95132c15732412d22c1476fa83f27a",
      "size": 29472,
      "height": 600,
      "width": 400,
      "created": "2014-01-02T02:20:00Z",
      "downloadedFrom": "https://company.com/logo.png",
      "name": "Marketing Videos",
      "opacity": 0.75,
      "padding": 0.1,
      "scale": 0.1,
      "position": "center"
    }
  }
}"""

DELETE_RESPONSE = '{"success": true, "errors": [], "messages": [], "result": {}}'

SIGNED_TOKEN = (
    "eyJhbGciOiJSUzI1NiIsImtpZCI6ImU5ZGI5OTBhODI2NjZkZDU3MWM3N2Y5NDRhNWM1YzhkIn0"
    ".eyJzdWIiOiJlYTk1MTMyYzE1NzMyNDEyZDIyYzE0NzZmYTgzZjI3YSJ9"
    ".OZhqOARADn1iubK6GKcn25hN3nU-hCFF5q9w2C4yup0"
)

SIGNED_URL_RESPONSE = (
    '{"success": true, "errors": [], "messages": [], "result": {"token": "' + SIGNED_TOKEN + '"}}'
)

EMBED_HTML = (
    '<stream id="ea95132c15732412d22c1476fa83f27a"></stream><script data-cfasync="false" defer '
    'type="text/javascript" src="https://embed.cloudflarestream.com/embed/we4g.fla9.latest.js"></script>'
)

BOT_MANAGEMENT_RESPONSE = """{
  "success": true,
  "errors": [],
  "messages": [],
  "result": {
    "enable_js": true,
    "fight_mode": true,
    "using_latest_model": true
  }
}"""

BOT_MANAGEMENT_UPDATED_RESPONSE = """{
  "success": true,
  "errors": [],
  "messages": [],
  "result": {
    "enable_js": false,
    "fight_mode": true,
    "sbfm_likely_automated": "block",
    "auto_update_model": true,
    "using_latest_model": true
  }
}"""
